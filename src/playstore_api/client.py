"""
PlayStoreAPI — main SDK client.
"""

import logging
from typing import Any, Optional, Union

from playstore_api.auth import Auth
from playstore_api.catalog import CatalogAPI
from playstore_api.device import DeviceProfile, DeviceProperties
from playstore_api.models.session import Locale, SessionState, SessionStore
from playstore_api.transport.http import HttpClient

logger = logging.getLogger(__name__)


class PlayStoreAPI:
    """Store client bound to one session (device, locale, token, GSF id).

    Token and GSF id are long lived; save them after ``login`` and pass them
    back in next time instead of logging in again.
    """

    def __init__(
        self,
        device: Optional[DeviceProfile] = None,
        locale: Union[str, Locale] = "en_US",
        token: Optional[str] = None,
        gsf_id: Optional[str] = None,
        http: Optional[HttpClient] = None,
    ):
        if isinstance(locale, str):
            locale = Locale.parse(locale)
        self.http = http or HttpClient()
        self.session = SessionStore(SessionState(
            device=device or DeviceProperties(),
            locale=locale,
            token=token,
            gsf_id=gsf_id,
        ))
        self.auth = Auth(self.http, self.session)
        self.catalog = CatalogAPI(self.http, self.session)

    @property
    def token(self) -> Optional[str]:
        return self.session.state.token

    @token.setter
    def token(self, value: Optional[str]) -> None:
        self.session.update(token=value)

    @property
    def gsf_id(self) -> Optional[str]:
        return self.session.state.gsf_id

    @gsf_id.setter
    def gsf_id(self, value: Optional[str]) -> None:
        self.session.update(gsf_id=value)

    @property
    def locale(self) -> Locale:
        return self.session.state.locale

    def login(self, email: str, password: str) -> dict[str, Any]:
        """Check the device in (if needed) and log in (if needed).

        The GSF id must exist before the token is requested: the store ties the
        token to the checked-in device.
        """
        if not self.gsf_id:
            ac2dm_token = self.auth.login_ac2dm(email, password)
            self.gsf_id = self.auth.checkin(email, ac2dm_token)
            logger.info("Device checked in as %s", self.gsf_id)
        if not self.token:
            self.token = self.auth.login(email, password)
            logger.info("Logged in as %s", email)
        return {"gsf_id": self.gsf_id, "token": self.token}

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "PlayStoreAPI":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
