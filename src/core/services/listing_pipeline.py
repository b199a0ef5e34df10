"""Listing search orchestration.

The CLI decides *which* queries to run; this module builds them, runs them
sequentially with an explicit token and collects one result per query.
Printing stays in the CLI layer through optional hooks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from adapters.petfinder import fetch_listings
from core.domain.errors import FetchError
from core.domain.models import ListingCollection
from core.domain.query import DateWindow, FilterSelection
from core.interfaces.listing_source import ListingFetcher
from core.log import get_logger
from core.services.query_urls import (
    DEFAULT_ORGANIZATION,
    build_filtered_url,
    build_window_url,
)

logger = get_logger(__name__)

_WINDOW_MESSAGES: dict[DateWindow, tuple[str, str]] = {
    DateWindow.TODAY: (
        "Looking for new dogs posted today...",
        "No new dogs today :(",
    ),
    DateWindow.LAST_3_DAYS: (
        "Looking for new dogs posted in the last 3 days...",
        "No new dogs posted recently :(",
    ),
}


@dataclass
class QueryMode:
    """One query to run: its URL plus the messages shown around it."""

    name: str
    url: str
    start_message: str
    empty_message: str


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    start: Callable[[QueryMode], None] | None = None
    warning: Callable[[str], None] | None = None
    finished: Callable[[QueryResult], None] | None = None


@dataclass
class QueryResult:
    """Outcome of a single mode: either a collection or the fetch error."""

    mode: QueryMode
    listings: ListingCollection | None = None
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PipelineResult:
    results: list[QueryResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def window_query(
    window: DateWindow,
    *,
    organization: str = DEFAULT_ORGANIZATION,
) -> QueryMode:
    start, empty = _WINDOW_MESSAGES[window]
    return QueryMode(
        name=window.value,
        url=build_window_url(window, organization=organization),
        start_message=start,
        empty_message=empty,
    )


def filtered_query(
    selection: FilterSelection,
    *,
    organization: str = DEFAULT_ORGANIZATION,
) -> QueryMode:
    ages, sizes, genders = selection.as_csv()
    return QueryMode(
        name="filter",
        url=build_filtered_url(ages, sizes, genders, organization=organization),
        start_message=(
            "Looking for new dogs with the selected filter options: "
            f"{ages} {sizes} {genders}"
        ),
        empty_message="No dogs match the selected filters :(",
    )


def run_queries(
    modes: Sequence[QueryMode],
    token: str,
    *,
    fetch: ListingFetcher = fetch_listings,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    """Run each mode in order. A failed fetch is recorded and skipped."""

    hooks = hooks or PipelineHooks()
    result = PipelineResult()

    for mode in modes:
        if hooks.start:
            hooks.start(mode)
        try:
            outcome = QueryResult(mode=mode, listings=fetch(mode.url, token))
        except FetchError as exc:
            message = f"Failed to fetch animals: {exc}"
            logger.warning("Mode %s failed: %s", mode.name, exc)
            result.warnings.append(message)
            if hooks.warning:
                hooks.warning(message)
            outcome = QueryResult(mode=mode, error=exc)

        result.results.append(outcome)
        if hooks.finished:
            hooks.finished(outcome)

    return result
