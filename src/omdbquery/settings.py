# WARNING: Never commit a file containing your OMDb API key.

"""Settings loader for the OMDb client.

Reads configuration from environment variables:
- OMDB_API_KEY (optional here; the CLI requires it)
- OMDB_BASE_URL (defaults to the public OMDb endpoint)
- OMDB_TIMEOUT (seconds, used when omdbquery opens its own HTTP client)
"""

from pydantic import ConfigDict, ValidationError
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://www.omdbapi.com/"
DEFAULT_TIMEOUT = 10.0


class MissingAPIKeyError(Exception):
    """Raised when no OMDb API key is configured."""

    def __init__(self, key: str = "OMDB_API_KEY") -> None:
        """Initialize the error with the missing key name."""
        super().__init__(
            f"Missing required API key: {key}\n"
            "Pass --apikey or set the OMDB_API_KEY environment variable. "
            "Free keys are available at https://www.omdbapi.com/apikey.aspx"
        )
        self.key = key


class InvalidSettingsError(ValueError):
    """Raised when an OMDB_* environment variable cannot be parsed.

    Configuration problems are reported before any request is made, so they
    are kept apart from the OMDb request errors.
    """

    def __init__(self, detail: str) -> None:
        """Initialize the error with the validation details."""
        super().__init__(f"Invalid OMDb settings:\n{detail}")
        self.detail = detail


class Settings(BaseSettings):
    """Environment-driven settings for OMDb requests."""

    OMDB_API_KEY: str | None = None
    OMDB_BASE_URL: str = DEFAULT_BASE_URL
    OMDB_TIMEOUT: float = DEFAULT_TIMEOUT

    model_config = ConfigDict(extra="allow")

    def require_api_key(self) -> str:
        """Return the configured API key or raise MissingAPIKeyError."""
        if not self.OMDB_API_KEY:
            raise MissingAPIKeyError()
        return self.OMDB_API_KEY


def load_settings() -> Settings:
    """Read settings from the environment or raise InvalidSettingsError."""
    try:
        return Settings()
    except ValidationError as exc:
        raise InvalidSettingsError(str(exc)) from exc
