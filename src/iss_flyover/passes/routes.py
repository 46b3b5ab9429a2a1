"""API routes for ISS pass lookups."""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from iss_flyover.exceptions import HTTPStatusError, ParseError, TransportError
from iss_flyover.passes.schemas import PassesResponse
from iss_flyover.passes.service import FlyoverService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["passes"])


def get_flyover_service(request: Request) -> FlyoverService:
    """FastAPI dependency that retrieves the FlyoverService from app state."""
    service: FlyoverService = request.app.state.flyover_service
    return service


@router.get("/passes", response_model=PassesResponse, summary="Upcoming ISS passes")
async def passes(
    service: Annotated[FlyoverService, Depends(get_flyover_service)],
) -> PassesResponse:
    """Look up upcoming ISS passes for the server's public IP location.

    Args:
        service: Injected FlyoverService instance.

    Returns:
        A PassesResponse with pass records in upstream order.
    """
    loop = asyncio.get_running_loop()

    try:
        records = await loop.run_in_executor(
            service.executor, service.next_passes_for_my_location
        )
    except TransportError as exc:
        logger.error("Upstream unreachable during pass lookup", extra={"error": str(exc)})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc
    except (HTTPStatusError, ParseError) as exc:
        logger.error("Upstream error during pass lookup", extra={"error": str(exc)})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc

    return PassesResponse(passes=records)
