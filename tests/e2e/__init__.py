"""Live end-to-end tests against the real OMDb API.

These tests hit the network and need a real key, so they are skipped unless
explicitly enabled:

    OMDBQUERY_E2E_TESTS=1 OMDB_API_KEY=... pytest tests/e2e/

Test markers:
- @pytest.mark.e2e: All end-to-end tests
- @pytest.mark.api: Tests requiring a real API key
"""
