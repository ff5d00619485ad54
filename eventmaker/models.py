"""
EventMaker — Models
Engine status, validated construction options and the per-emission action record.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from . import config


class EventStatus(str, Enum):
    IDLE = "idle"
    DISCONNECTED = "disconnected"
    PROCESSING = "processing"


class EventMakerOptions(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"logs": True, "name": "bus"},
                {"logs": False},
            ]
        }
    }

    logs: bool = Field(default_factory=lambda: config.LOGS, description="Print diagnostic lines")
    name: str | None = Field(None, max_length=200, description="Cosmetic name used in logs and str()")

    @field_validator("logs", mode="before")
    @classmethod
    def logs_default_when_none(cls, v: Any) -> Any:
        return config.LOGS if v is None else v

    @field_validator("name")
    @classmethod
    def blank_name_is_no_name(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


@dataclass
class ActionRecord:
    """
    Per-emission record handed to every middleware.
    Middlewares may reassign `payload`; listeners receive its final value.
    """

    payload: list[Any]
    date: datetime = field(default_factory=lambda: datetime.now(UTC))
