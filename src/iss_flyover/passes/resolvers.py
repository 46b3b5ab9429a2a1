"""HTTP lookups against the IP, geolocation and ISS pass-prediction services.

Each function issues exactly one GET request. Transport failures raise
TransportError and non-200 responses raise HTTPStatusError; the geolocation
and flyover lookups hand back the raw body for the caller to parse.
"""

import logging

import requests

from iss_flyover.config import Settings
from iss_flyover.exceptions import HTTPStatusError, ParseError, TransportError
from iss_flyover.passes.schemas import Coordinates

logger = logging.getLogger(__name__)


def _get(url: str, *, resource: str, timeout: float | None) -> requests.Response:
    """GET a URL and return the response if it came back with status 200."""
    logger.info("Requesting upstream service", extra={"resource": resource, "url": url})
    try:
        response = requests.get(url, timeout=timeout)
    except requests.exceptions.RequestException as exc:
        logger.error(
            "Upstream request failed",
            extra={"resource": resource, "url": url, "error": str(exc)},
        )
        raise TransportError(f"Request failed when fetching {resource}: {exc}") from exc

    if response.status_code != 200:
        logger.error(
            "Upstream service returned an error status",
            extra={"resource": resource, "status_code": response.status_code},
        )
        raise HTTPStatusError(response.status_code, response.text, resource=resource)

    return response


def fetch_my_ip(settings: Settings) -> str:
    """Look up the caller's public IP address.

    Args:
        settings: Settings holding the IP service URL and request timeout.

    Returns:
        The IP address as a string, e.g. '162.245.144.188'.

    Raises:
        TransportError: If the request could not be completed.
        HTTPStatusError: If the service answered with a non-200 status.
        ParseError: If the body is not JSON or has no 'ip' field.
    """
    response = _get(settings.ip_service_url, resource="IP", timeout=settings.request_timeout)
    try:
        ip = response.json()["ip"]
    except (ValueError, KeyError, TypeError) as exc:
        raise ParseError(f"Could not read IP from response: {response.text}") from exc

    if not isinstance(ip, str) or not ip:
        raise ParseError(f"Could not read IP from response: {response.text}")
    return ip


def fetch_coords_by_ip(ip: str, settings: Settings) -> str:
    """Fetch the geolocation record for an IP address.

    Returns:
        The raw JSON body, which carries 'latitude' and 'longitude'.
    """
    url = settings.geo_service_url.format(ip=ip)
    response = _get(url, resource="coordinates for IP", timeout=settings.request_timeout)
    return response.text


def fetch_iss_flyover_times(coordinates: Coordinates, settings: Settings) -> str:
    """Fetch upcoming ISS pass predictions for a location.

    Returns:
        The raw JSON body, with pass records under 'response'.
    """
    url = settings.flyover_service_url.format(
        latitude=coordinates.latitude,
        longitude=coordinates.longitude,
    )
    response = _get(url, resource="ISS flyover times", timeout=settings.request_timeout)
    return response.text
