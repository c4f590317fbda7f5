"""
Canonical JSON encoding for the envelope.

The "aps" object is written by hand with a fixed field order and
presence-conditional omission so that byte counts are deterministic.
Custom field values go through the generic json encoder.
"""

import json
from typing import Any

from apns_payload.models.aps import Aps, RichAps, SimpleAps
from apns_payload.models.payload import RichAlert

_value_encoder = json.JSONEncoder(ensure_ascii=False, allow_nan=False, separators=(",", ":"))


def encode_string(value: str) -> str:
    """Quoted JSON string literal; non-ASCII stays as-is."""
    return _value_encoder.encode(value)


def encode_value(value: Any) -> str:
    """Generic compact JSON, used for custom field values only."""
    return _value_encoder.encode(value)


def _field(name: str, encoded: str) -> str:
    return f'"{name}":{encoded}'


def _string_array(values: list[str]) -> str:
    return "[" + ",".join(encode_string(v) for v in values) + "]"


def encode_rich_alert(alert: RichAlert) -> str:
    # Alphabetical after "body"
    parts = [_field("body", encode_string(alert.body))]
    if alert.action_loc_key:
        parts.append(_field("action-loc-key", encode_string(alert.action_loc_key)))
    if alert.launch_image:
        parts.append(_field("launch-image", encode_string(alert.launch_image)))
    if alert.loc_args:
        parts.append(_field("loc-args", _string_array(alert.loc_args)))
    if alert.loc_key:
        parts.append(_field("loc-key", encode_string(alert.loc_key)))
    if alert.title:
        parts.append(_field("title", encode_string(alert.title)))
    if alert.title_loc_args:
        parts.append(_field("title-loc-args", _string_array(alert.title_loc_args)))
    if alert.title_loc_key:
        parts.append(_field("title-loc-key", encode_string(alert.title_loc_key)))
    return "{" + ",".join(parts) + "}"


def encode_aps(aps: Aps) -> str:
    if isinstance(aps, SimpleAps):
        alert = encode_string(aps.alert)
    elif isinstance(aps, RichAps):
        alert = encode_rich_alert(aps.alert)
    else:
        raise TypeError(f"Not an aps object: {type(aps).__name__}")

    parts = [_field("alert", alert)]
    if aps.badge is not None:
        parts.append(_field("badge", str(aps.badge)))
    if aps.category:
        parts.append(_field("category", encode_string(aps.category)))
    if aps.content_available != 0:
        parts.append(_field("content-available", str(aps.content_available)))
    if aps.sound:
        parts.append(_field("sound", encode_string(aps.sound)))
    return "{" + ",".join(parts) + "}"


def encode_envelope(envelope: dict[str, Any]) -> bytes:
    """Encode an assembled envelope to UTF-8 bytes, keeping key order."""
    parts = []
    for key, value in envelope.items():
        if isinstance(value, (SimpleAps, RichAps)):
            encoded = encode_aps(value)
        else:
            encoded = encode_value(value)
        parts.append(f"{encode_string(key)}:{encoded}")
    return ("{" + ",".join(parts) + "}").encode("utf-8")
