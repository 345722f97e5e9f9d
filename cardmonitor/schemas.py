"""Pydantic schemas for API IO."""

from __future__ import annotations

import base64
from typing import Any

from pydantic import BaseModel, field_validator


class CardStatus(BaseModel):
    """One card joined with its active status row.

    Field order is the order of keys in the JSON output.
    """

    id: int
    name: str
    data: str
    last_updated: int
    size: int
    status: int
    rate: float
    num_bad_sectors: int
    cur_round_num: int

    @field_validator("data", mode="before")
    @classmethod
    def encode_sector_map(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (bytes, bytearray, memoryview)):
            return base64.b64encode(bytes(value)).decode("ascii")
        return value


class ErrorResponse(BaseModel):
    error: str


class HealthStatus(BaseModel):
    status: str
