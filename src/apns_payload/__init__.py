"""
apns-payload — size-bounded APNs payload builder.

Renders a push notification as deterministic JSON under the "aps" key,
clipping the alert text with an ellipsis when the body exceeds its byte budget.
"""

__version__ = "0.1.0"

from apns_payload.models.payload import Payload, RichAlert, Shape
from apns_payload.envelope import APS_KEY, assemble
from apns_payload.marshal import (
    DEFAULT_MAX_PAYLOAD_SIZE,
    ELLIPSIS,
    LEGACY_MAX_PAYLOAD_SIZE,
    build_aps,
    marshal,
    render,
    select_shape,
)
from apns_payload.errors import PayloadError, ReservedKeyCollisionError, PayloadTooLargeError

__all__ = [
    "Payload",
    "RichAlert",
    "Shape",
    "APS_KEY",
    "ELLIPSIS",
    "DEFAULT_MAX_PAYLOAD_SIZE",
    "LEGACY_MAX_PAYLOAD_SIZE",
    "assemble",
    "build_aps",
    "marshal",
    "render",
    "select_shape",
    "PayloadError",
    "ReservedKeyCollisionError",
    "PayloadTooLargeError",
]
