"""Petfinder OAuth2 token exchange (client credentials grant).

One POST per call. No caching and no retries: the caller authenticates once
per run and passes the token explicitly to every fetch.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from adapters.http_client import open_client
from core.config import AppSettings
from core.domain.errors import AuthDecodeError, AuthStatusError, AuthTransportError
from core.domain.models import TokenResponse
from core.log import get_logger
from core.services.query_urls import TOKEN_ENDPOINT

logger = get_logger(__name__)


def authenticate(
    client_id: str,
    client_secret: str,
    *,
    settings: AppSettings | None = None,
    client: httpx.Client | None = None,
    token_url: str = TOKEN_ENDPOINT,
) -> str:
    """Exchange the API key/secret for an access token.

    Raises:
        AuthTransportError: the request never got a response.
        AuthStatusError: HTTP status other than 200 (`status_code` attached).
        AuthDecodeError: body is not JSON or lacks `access_token`.
    """

    data = {
        "grant_type": "client_credentials",
        "client_id": client_id,
        "client_secret": client_secret,
    }

    logger.debug("Requesting access token from %s", token_url)
    try:
        with open_client(client, settings) as http:
            # `data=` sends application/x-www-form-urlencoded
            response = http.post(token_url, data=data)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        logger.warning("Token request failed: %s", exc)
        raise AuthTransportError(f"token request failed: {exc}") from exc

    if response.status_code != httpx.codes.OK:
        logger.warning("Token request returned HTTP %s", response.status_code)
        raise AuthStatusError(
            f"authentication failed with status code: {response.status_code}",
            status_code=response.status_code,
        )

    try:
        payload = TokenResponse.model_validate_json(response.content)
    except ValidationError as exc:
        logger.warning("Unexpected token payload (%d bytes)", len(response.content))
        raise AuthDecodeError(f"could not decode token response: {exc}") from exc

    return payload.access_token
