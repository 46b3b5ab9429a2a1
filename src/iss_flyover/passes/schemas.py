"""Pydantic schemas for location and ISS pass payloads."""

from pydantic import BaseModel, ConfigDict


class Coordinates(BaseModel):
    """Latitude and longitude in decimal degrees.

    Strict so that booleans and numeric strings are rejected; JSON integers
    are still accepted.
    """

    model_config = ConfigDict(strict=True)

    latitude: float
    longitude: float


class PassRecord(BaseModel):
    """A single predicted ISS pass."""

    model_config = ConfigDict(strict=True)

    risetime: int
    duration: int


class FlyoverPayload(BaseModel):
    """Body returned by the pass-prediction service."""

    response: list[PassRecord]


class PassesResponse(BaseModel):
    """Response schema for the passes endpoint."""

    passes: list[PassRecord]
