"""Request execution shared by every OMDb query.

Turns a query's accumulated parameters into a single GET request and the
single response into a typed value.

The check order matters: OMDb answers "nothing found" with a perfectly valid
JSON body (often with HTTP 200), so the ``Response`` envelope is validated and
inspected before the rest of the payload is trusted.
"""

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from omdbquery.errors import DecodeError, RemoteError, StatusError, TransportError
from omdbquery.models import Envelope
from omdbquery.settings import Settings, load_settings

logger = logging.getLogger(__name__)

API_VERSION = "1"
RESPONSE_FORMAT = "json"
UNKNOWN_ERROR = "Unknown error"

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_params(
    fields: dict[str, str], settings: Settings | None = None
) -> dict[str, str]:
    """Return the outbound query parameters for a set of query fields.

    Args:
        fields: Discriminator plus every optional field that was set.
        settings: Used for the fallback API key when ``fields`` has none.

    Returns:
        A flat parameter dict. Unset fields are absent, never empty.
    """
    params = {"v": API_VERSION, "r": RESPONSE_FORMAT}
    params.update(fields)
    if "apikey" not in params:
        settings = settings or load_settings()
        if settings.OMDB_API_KEY:
            params["apikey"] = settings.OMDB_API_KEY
    return params


def _redact(params: dict[str, str]) -> dict[str, str]:
    return {k: ("***" if k == "apikey" else v) for k, v in params.items()}


def _decode_body(resp: httpx.Response) -> dict[str, Any]:
    try:
        data = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"OMDb returned invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise DecodeError(
            f"OMDb returned {type(data).__name__}, expected a JSON object"
        )
    return data


async def _send(
    client: httpx.AsyncClient, url: str, params: dict[str, str]
) -> httpx.Response:
    try:
        return await client.get(url, params=params)
    except httpx.DecodingError as exc:
        raise DecodeError(f"OMDb response body could not be decoded: {exc}") from exc
    except httpx.RequestError as exc:
        raise TransportError(f"OMDb request failed: {exc!r}") from exc


async def execute(
    fields: dict[str, str],
    result_model: type[ModelT],
    *,
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> ModelT:
    """Perform one OMDb request and decode the response into ``result_model``.

    Args:
        fields: Query fields keyed by OMDb parameter name.
        result_model: Pydantic model to validate a successful payload into.
        client: Optional HTTP client to send through. It is not closed here.
            When omitted a client is opened for this call only.
        settings: Optional settings; read from the environment when omitted.

    Returns:
        The decoded ``result_model`` instance.

    Raises:
        TransportError: If the HTTP exchange failed (including redirect
            loops).
        StatusError: If OMDb answered with a non-2xx status and no error body.
        DecodeError: If the body cannot be decoded (bad content encoding,
            invalid JSON) or does not have the expected shape.
        RemoteError: If OMDb reported ``Response: "False"``.
        InvalidSettingsError: If ``settings`` is omitted and the OMDB_*
            environment variables cannot be parsed.
    """
    settings = settings or load_settings()
    params = build_params(fields, settings)
    url = settings.OMDB_BASE_URL
    logger.debug("OMDb request: %s %s", url, _redact(params))

    if client is None:
        async with httpx.AsyncClient(timeout=settings.OMDB_TIMEOUT) as own_client:
            resp = await _send(own_client, url, params)
    else:
        resp = await _send(client, url, params)

    logger.debug("OMDb response: HTTP %s", resp.status_code)

    try:
        data = _decode_body(resp)
        envelope = Envelope.model_validate(data)
    except (DecodeError, ValidationError) as exc:
        # No usable body; an error status is the more useful report.
        if not resp.is_success:
            raise StatusError(resp.status_code, resp.reason_phrase) from exc
        if isinstance(exc, DecodeError):
            raise
        raise DecodeError(f"OMDb response is missing 'Response': {exc}") from exc

    if not envelope.ok:
        raise RemoteError(envelope.error or UNKNOWN_ERROR, resp.status_code)

    if not resp.is_success:
        raise StatusError(resp.status_code, resp.reason_phrase)

    try:
        return result_model.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(
            f"OMDb response does not match {result_model.__name__}: {exc}"
        ) from exc
