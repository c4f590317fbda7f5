"""
Notification objects rendered under the reserved "aps" key.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel

from apns_payload.models.payload import RichAlert


class SimpleAps(BaseModel):
    alert: str
    badge: Optional[int] = None
    sound: str = ""
    category: str = ""
    content_available: int = 0

    @property
    def alert_text(self) -> str:
        return self.alert

    def with_alert_text(self, text: str) -> "SimpleAps":
        return self.model_copy(update={"alert": text})


class RichAps(BaseModel):
    alert: RichAlert
    badge: Optional[int] = None
    sound: str = ""
    category: str = ""
    content_available: int = 0

    @property
    def alert_text(self) -> str:
        return self.alert.body

    def with_alert_text(self, text: str) -> "RichAps":
        alert = self.alert.model_copy(update={"body": text})
        return self.model_copy(update={"alert": alert})


Aps = Union[SimpleAps, RichAps]
