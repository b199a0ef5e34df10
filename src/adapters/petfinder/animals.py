"""Petfinder `GET /animals` listing fetch."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from adapters.http_client import open_client
from core.config import AppSettings
from core.domain.errors import FetchDecodeError, FetchStatusError, FetchTransportError
from core.domain.models import ListingCollection
from core.log import get_logger

logger = get_logger(__name__)


def fetch_listings(
    url: str,
    token: str,
    *,
    settings: AppSettings | None = None,
    client: httpx.Client | None = None,
) -> ListingCollection:
    """Fetch and decode the listings for an already-built query URL.

    An empty `animals` array is a successful, zero-length result. A missing
    `animals` key, invalid JSON, a non-200 status or a network failure raise a
    `FetchError` subclass.
    """

    headers = {"Authorization": f"Bearer {token}"}

    logger.debug("GET %s", url)
    try:
        with open_client(client, settings) as http:
            response = http.get(url, headers=headers)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        logger.warning("Listing request failed: %s", exc)
        raise FetchTransportError(f"listing request failed: {exc}") from exc

    if response.status_code != httpx.codes.OK:
        logger.warning("Listing request returned HTTP %s", response.status_code)
        raise FetchStatusError(
            f"API request failed with status code: {response.status_code}",
            status_code=response.status_code,
        )

    try:
        collection = ListingCollection.model_validate_json(response.content)
    except ValidationError as exc:
        logger.warning("Could not decode listing response from %s", url)
        raise FetchDecodeError(f"could not decode listing response: {exc}") from exc

    logger.info("Fetched %d listing(s)", len(collection))
    return collection
