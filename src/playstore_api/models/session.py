"""
Session state shared by every request: auth token, device identity, locale
and device profile.
"""

from __future__ import annotations

import threading
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Locale(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: str
    country: str = ""

    @classmethod
    def parse(cls, value: str) -> "Locale":
        """Parse ``en_US`` / ``en-US`` / ``en``."""
        language, _, country = value.replace("-", "_").partition("_")
        return cls(language=language.lower(), country=country.upper())

    @property
    def accept_language(self) -> str:
        return str(self).replace("_", "-")

    def __str__(self) -> str:
        if self.country:
            return f"{self.language}_{self.country}"
        return self.language


class SessionState(BaseModel):
    """Immutable snapshot. ``SessionStore.update`` swaps in a new one."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    device: Any  # DeviceProfile
    locale: Locale = Locale(language="en", country="US")
    token: Optional[str] = None
    gsf_id: Optional[str] = None


class SessionStore:
    """Holds the current SessionState.

    Writers (login, checkin) replace the whole state under a lock; readers take
    ``state`` once per request and never see a half-applied update.
    """

    def __init__(self, state: SessionState):
        self._state = state
        self._lock = threading.Lock()

    @property
    def state(self) -> SessionState:
        return self._state

    def update(self, **fields: Any) -> SessionState:
        with self._lock:
            self._state = self._state.model_copy(update=fields)
            return self._state
