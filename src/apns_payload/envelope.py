"""
Envelope assembly: the "aps" object plus custom fields at the top level.
"""

from typing import Any, Mapping

from apns_payload.errors import ReservedKeyCollisionError
from apns_payload.models.aps import Aps

APS_KEY = "aps"


def assemble(aps: Aps, custom_fields: Mapping[str, Any]) -> dict[str, Any]:
    """Build the envelope dict: "aps" first, then custom fields in caller order."""
    if APS_KEY in custom_fields:
        raise ReservedKeyCollisionError(APS_KEY)
    envelope: dict[str, Any] = {APS_KEY: aps}
    envelope.update(custom_fields)
    return envelope
