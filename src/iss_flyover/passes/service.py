"""ISS pass lookup service chaining IP, geolocation and flyover lookups."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import ValidationError

from iss_flyover.config import Settings
from iss_flyover.exceptions import AppError, ParseError
from iss_flyover.passes.resolvers import (
    fetch_coords_by_ip,
    fetch_iss_flyover_times,
    fetch_my_ip,
)
from iss_flyover.passes.schemas import Coordinates, FlyoverPayload, PassRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Result of a lookup: exactly one of ``error`` or ``value`` is set."""

    error: AppError | None = None
    value: T | None = None

    def __post_init__(self) -> None:
        if (self.error is None) == (self.value is None):
            raise ValueError("Outcome requires exactly one of error or value")

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_coordinates(body: str) -> Coordinates:
    """Parse a geolocation body into Coordinates.

    Raises:
        ParseError: If the body is not JSON or lacks numeric latitude/longitude.
    """
    try:
        return Coordinates.model_validate_json(body)
    except ValidationError as exc:
        raise ParseError(f"Could not read coordinates from response: {body}") from exc


def parse_flyover_times(body: str) -> list[PassRecord]:
    """Parse a flyover body into pass records, preserving upstream order.

    Raises:
        ParseError: If the body is not JSON or has no valid 'response' list.
    """
    try:
        payload = FlyoverPayload.model_validate_json(body)
    except ValidationError as exc:
        raise ParseError(f"Could not read flyover times from response: {body}") from exc
    return payload.response


class FlyoverService:
    """Service for finding upcoming ISS passes over the caller's location.

    Every run is independent: the three upstream calls are made in strict
    sequence and nothing is cached between runs. The executor is created
    on first use by async callers that run the blocking lookup off the event loop.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._executor: ThreadPoolExecutor | None = None

    @property
    def executor(self) -> ThreadPoolExecutor:
        """Thread pool executor for running blocking I/O in async contexts."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=self._settings.max_workers)
        return self._executor

    def next_passes_for_my_location(self) -> list[PassRecord]:
        """Look up upcoming ISS passes for the caller's current location.

        Returns:
            Pass records in the order the prediction service returned them.

        Raises:
            TransportError: If any upstream request could not be completed.
            HTTPStatusError: If any upstream service answered with a non-200 status.
            ParseError: If any successful response could not be parsed.
        """
        logger.debug("Awaiting IP address")
        ip = fetch_my_ip(self._settings)

        logger.debug("Awaiting coordinates", extra={"ip": ip})
        coordinates = parse_coordinates(fetch_coords_by_ip(ip, self._settings))

        logger.debug(
            "Awaiting flyover times",
            extra={"latitude": coordinates.latitude, "longitude": coordinates.longitude},
        )
        passes = parse_flyover_times(fetch_iss_flyover_times(coordinates, self._settings))

        logger.info("Found upcoming ISS passes", extra={"count": len(passes)})
        return passes

    def run(self) -> Outcome[list[PassRecord]]:
        """Run the lookup and capture the first application error, if any."""
        try:
            return Outcome(value=self.next_passes_for_my_location())
        except AppError as exc:
            logger.warning("ISS pass lookup failed", extra={"error": str(exc), "code": exc.code})
            return Outcome(error=exc)

    def shutdown(self) -> None:
        """Shut down the thread pool executor."""
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None
