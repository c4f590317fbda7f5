"""
Size-bounded payload marshalling.

If the encoded envelope exceeds the byte budget, the alert text (the simple
alert string or the rich alert body) is clipped from the end, an ellipsis is
appended, and the envelope is encoded once more. There is exactly one
trimming pass.
"""

import logging
from typing import Any

from apns_payload.encoding import encode_envelope
from apns_payload.envelope import APS_KEY, assemble
from apns_payload.errors import PayloadError, PayloadTooLargeError
from apns_payload.models.aps import Aps, RichAps, SimpleAps
from apns_payload.models.payload import Payload, Shape

logger = logging.getLogger(__name__)

ELLIPSIS = "..."
DEFAULT_MAX_PAYLOAD_SIZE = 2048
LEGACY_MAX_PAYLOAD_SIZE = 256


def select_shape(payload: Payload) -> Shape:
    """A non-empty alert_text means a plain string alert; anything else is rich."""
    return payload.shape


def build_aps(payload: Payload) -> Aps:
    """Notification object for whichever alert shape the payload uses."""
    common = dict(
        badge=payload.badge,
        sound=payload.sound,
        category=payload.category,
        content_available=payload.content_available,
    )
    if select_shape(payload) is Shape.SIMPLE:
        return SimpleAps(alert=payload.alert_text, **common)
    return RichAps(alert=payload.alert_body, **common)


def render(envelope: dict[str, Any], max_bytes: int) -> bytes:
    data = encode_envelope(envelope)
    if len(data) <= max_bytes:
        return data

    aps: Aps = envelope[APS_KEY]
    raw = aps.alert_text.encode("utf-8")
    clip_size = len(data) - max_bytes + len(ELLIPSIS)
    if clip_size > len(raw):
        raise PayloadTooLargeError(max_bytes, size=len(data))

    logger.debug(
        "Payload is %d bytes over %d, clipping %d of %d alert bytes",
        len(data) - max_bytes, max_bytes, clip_size, len(raw),
    )
    # A cut inside a multibyte character drops that partial character.
    kept = raw[:len(raw) - clip_size].decode("utf-8", errors="ignore")
    trimmed = aps.with_alert_text(kept + ELLIPSIS)
    # Replacing an existing key keeps "aps" in first position.
    return encode_envelope({**envelope, APS_KEY: trimmed})


def marshal(payload: Payload, max_bytes: int = DEFAULT_MAX_PAYLOAD_SIZE) -> bytes:
    """Encode a payload to JSON bytes no longer than max_bytes.

    Raises ReservedKeyCollisionError if a custom field is named "aps", and
    PayloadTooLargeError if clipping the alert text cannot make it fit. The
    raised error carries the payload on its `payload` attribute.
    """
    try:
        aps = build_aps(payload)
        logger.debug("Marshalling %s payload with budget %d", select_shape(payload).value, max_bytes)
        envelope = assemble(aps, payload.custom_fields)
        return render(envelope, max_bytes)
    except PayloadError as e:
        e.payload = payload
        raise
