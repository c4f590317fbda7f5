"""
apns-payload error types.
"""

from typing import Any, Optional


class PayloadError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details
        # Set by marshal() so callers can reach token / extra_data.
        self.payload: Any = None


class ReservedKeyCollisionError(PayloadError):
    def __init__(self, key: str, code: str = "reserved_key_collision"):
        super().__init__(code, f"Cannot have a custom field named {key}", {"key": key})
        self.key = key


class PayloadTooLargeError(PayloadError):
    def __init__(self, max_bytes: int, size: Optional[int] = None, code: str = "payload_too_large"):
        super().__init__(
            code,
            f"Payload was too long to successfully marshal to less than {max_bytes}",
            {"max_bytes": max_bytes, "size": size},
        )
        self.max_bytes = max_bytes
        self.size = size
