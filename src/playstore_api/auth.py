"""
Authentication flows — device checkin and legacy login.

Checkin mints the device identity (GSF id) in two steps; login trades an
email and password for a long-lived token. Results are returned, not stored:
callers decide where they go (see ``PlayStoreAPI.login``).
"""

import logging
from typing import Any, NamedTuple

from playstore_api.errors import AuthenticationError
from playstore_api.models import proto
from playstore_api.models.session import SessionStore
from playstore_api.transport.envelope import decode_message
from playstore_api.transport.http import C2DM_REGISTER_URL, CHECKIN_URL, LOGIN_URL, HttpClient
from playstore_api.transport.legacy import parse_key_value
from playstore_api.transport.request import authorization, build_headers, default_login_params

logger = logging.getLogger(__name__)

CHECKIN_CONTENT_TYPE = "application/x-protobuffer"


def _signed64(value: int) -> int:
    """Reinterpret an unsigned 64-bit value for an int64 field."""
    return value - (1 << 64) if value >= 1 << 63 else value


class CheckinIdentity(NamedTuple):
    """Step-1 checkin result. Only lives until step 2 has been sent."""
    android_id: int
    security_token: int

    @property
    def gsf_id(self) -> str:
        return format(self.android_id, "x")

    @property
    def security_token_hex(self) -> str:
        return format(self.security_token, "x")


class Auth:
    def __init__(self, http: HttpClient, session: SessionStore):
        self._http = http
        self._session = session

    def checkin(self, email: str, ac2dm_token: str) -> str:
        """Register the device and bind it to the account. Returns the GSF id.

        Step 1 sends the bare device checkin to obtain an android id and
        security token; step 2 resends it with both set and the account
        cookies attached. A failure in either step leaves no usable identity.
        """
        request = self._session.state.device.build_checkin_request()
        response = self._send_checkin(request)
        identity = CheckinIdentity(response.androidId, response.securityToken)
        logger.debug("Checkin step 1 issued android id %s", identity.gsf_id)

        bound = proto.AndroidCheckinRequest()
        bound.CopyFrom(request)
        bound.id = _signed64(identity.android_id)
        bound.securityToken = identity.security_token
        bound.accountCookie.append(f"[{email}]")
        bound.accountCookie.append(ac2dm_token)
        self._send_checkin(bound)
        logger.debug("Checkin step 2 bound android id %s", identity.gsf_id)
        return identity.gsf_id

    def _send_checkin(self, request: Any) -> Any:
        headers = build_headers(self._session.state)
        headers["Content-Type"] = CHECKIN_CONTENT_TYPE
        raw = self._http.post(CHECKIN_URL, request.SerializeToString(), headers)
        return decode_message(proto.AndroidCheckinResponse, raw)

    def login(self, email: str, password: str) -> str:
        """Log in to the store service. Returns the session token."""
        return self._login(email, password, {
            "service": "androidmarket",
            "app": "com.android.vending",
        }, "login")

    def login_ac2dm(self, email: str, password: str) -> str:
        """Log in to the push service. Returns the AC2DM token used by checkin."""
        return self._login(email, password, {
            "service": "ac2dm",
            "add_account": "1",
            "app": "com.google.android.gsf",
        }, "ac2dm login")

    def _login(self, email: str, password: str, service_params: dict[str, str], operation: str) -> str:
        state = self._session.state
        form = default_login_params(state, email, password)
        form.update(service_params)
        response = parse_key_value(self._http.post_form(LOGIN_URL, form, build_headers(state)))
        if "Auth" not in response:
            logger.warning("Authentication failed (%s) for %s", operation, email)
            raise AuthenticationError(
                f"Authentication failed! ({operation})",
                details={"error": response["Error"]} if "Error" in response else None,
            )
        return response["Auth"]

    def c2dm_register(self, application: str, sender: str, email: str, password: str) -> dict[str, str]:
        """Register an application for push messages on this device."""
        state = self._session.state
        if not state.gsf_id:
            raise AuthenticationError("Device is not checked in (no GSF id)")
        form = {
            "app": application,
            "sender": sender,
            "device": str(int(state.gsf_id, 16)),
        }
        headers = build_headers(state)
        headers["Authorization"] = authorization(self.login_ac2dm(email, password))
        return parse_key_value(self._http.post_form(C2DM_REGISTER_URL, form, headers))
