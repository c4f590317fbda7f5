"""
Payload models: what the caller hands to the builder.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, Field, JsonValue, field_validator

DEFAULT_PRIORITY = 5
IMMEDIATE_PRIORITY = 10


def _check_text(value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"text is not encodable as UTF-8: {e.reason}") from e
    return value


# Any str that will be written into the UTF-8 body
Text = Annotated[str, AfterValidator(_check_text)]


def _check_json(value: Any) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"custom field values must be finite numbers, got {value!r}")
    if isinstance(value, str):
        _check_text(value)
    elif isinstance(value, list):
        for item in value:
            _check_json(item)
    elif isinstance(value, dict):
        for key, item in value.items():
            _check_text(key)
            _check_json(item)


class Shape(str, Enum):
    SIMPLE = "simple"
    RICH = "rich"


class RichAlert(BaseModel):
    """Structured alert. Only `body` is always rendered; it is also what gets trimmed."""
    body: Text = ""
    action_loc_key: Text = ""
    loc_key: Text = ""
    loc_args: list[Text] = []
    launch_image: Text = ""

    # Title fields, iOS 8.2+
    title: Text = ""
    title_loc_key: Text = ""
    title_loc_args: list[Text] = []


class Payload(BaseModel):
    # Simple alert; a non-empty value wins over alert_body
    alert_text: Text = ""
    alert_body: RichAlert = RichAlert()

    badge: Optional[int] = None  # None = omitted, 0 = explicit "badge":0
    sound: Text = ""
    content_available: int = 0
    category: Text = ""

    # Merged at the top level of the envelope, outside "aps"
    custom_fields: dict[str, JsonValue] = Field(default_factory=dict)

    # Transport fields, never rendered into the body
    expiration_time: int = Field(0, ge=0, le=0xFFFFFFFF)  # UNIX seconds
    priority: int = Field(0, ge=0, le=0xFF)
    token: str = ""
    extra_data: Optional[Any] = None

    @field_validator("custom_fields")
    @classmethod
    def custom_fields_are_strict_json(cls, value: dict[str, Any]) -> dict[str, Any]:
        _check_json(value)
        return value

    @property
    def is_simple(self) -> bool:
        return self.alert_text != ""

    @property
    def shape(self) -> Shape:
        return Shape.SIMPLE if self.is_simple else Shape.RICH

    @property
    def normalized_priority(self) -> int:
        """Delivery priority: 10 is kept, anything else falls back to 5."""
        return IMMEDIATE_PRIORITY if self.priority == IMMEDIATE_PRIORITY else DEFAULT_PRIORITY

    def marshal(self, max_bytes: Optional[int] = None) -> bytes:
        from apns_payload.marshal import DEFAULT_MAX_PAYLOAD_SIZE, marshal
        return marshal(self, DEFAULT_MAX_PAYLOAD_SIZE if max_bytes is None else max_bytes)
