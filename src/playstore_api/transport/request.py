"""
Request assembly. Headers and default parameters derived from session state.

All builders are pure functions of a SessionState snapshot and call inputs.
"""

from typing import Optional

from playstore_api.models.session import SessionState

ACCOUNT_TYPE_HOSTED_OR_GOOGLE = "HOSTED_OR_GOOGLE"

# SHA1 of the GoogleLoginService certificate; the server does not check it.
CLIENT_SIGNATURE = "38918a453d07199354f8b19af05ec6562ced5788"

# "c=3" restricts results to apps (no books, music or movies).
APPS_CATEGORY = "3"

# Encoded list of experiment targets captured from a real store app.
ENCODED_TARGETS = (
    "CAEScFfqlIEG6gUYogFWrAISK1WDAg+hAZoCDgIU1gYEOIACFkLMAeQBnASLATlASUuyAyqCAjY5igOMBQzfA/IClwFbApUC4ANbtgKV"
    "AS7OAX8YswHFBhgDwAOPAmGEBt4OfKkB5weSB5AFASkiN68akgMaxAMSAQEBA9kBO7UBFE1KVwIDBGs3go6BBgEBAgMECQgJAQIEAQME"
    "AQMBBQEBBAUEFQYCBgUEAwMBDwIBAgOrARwBEwMEAg0mrwESfTEcAQEKG4EBMxghChMBDwYGASI3hAEODEwXCVh/EREZA4sBYwEdFAgI"
    "IwkQcGQRDzQ2fTC2AjfVAQIBAYoBGRg2FhYFBwEqNzACJShzFFblAo0CFxpFNBzaAd0DHjIRI4sBJZcBPdwBCQGhAUd2A7kBLBVPngEE"
    "CHl0UEUMtQETigHMAgUFCc0BBUUlTywdHDgBiAJ+vgKhAU0uAcYCAWQ/5ALUAw1UwQHUBpIBCdQDhgL4AY4CBQICjARbGFBGWzA1CAEM"
    "OQH+BRAOCAZywAIDyQZ2MgM3BxsoAgUEBwcHFia3AgcGTBwHBYwBAlcBggFxSGgIrAEEBw4QEqUCASsWadsHCgUCBQMD7QICA3tXCUw7"
    "ugJZAwGyAUwpIwM5AwkDBQMJA5sBCw8BNxBVVBwVKhebARkBAwsQEAgEAhESAgQJEBCZATMdzgEBBwG8AQQYKSMUkAEDAwY/CTs4/wEa"
    "AUt1AwEDAQUBAgIEAwYEDx1dB2wGeBFgTQ"
)

UPLOAD_DEVICE_CONFIG_HEADERS = {
    "X-DFE-Enabled-Experiments": "cl:billing.select_add_instrument_by_default",
    "X-DFE-Unsupported-Experiments": (
        "nocache:billing.use_charging_poller,market_emails,buyer_currency,prod_baseline,"
        "checkin.set_asset_paid_app_field,shekel_test,content_ratings,buyer_currency_in_app,"
        "nocache:encrypted_apk,recent_changes"
    ),
    "X-DFE-Client-Id": "am-android-google",
    "X-DFE-SmallestScreenWidthDp": "320",
    "X-DFE-Filter-Level": "3",
}


def authorization(token: str) -> str:
    return f"GoogleLogin auth={token}"


def build_headers(state: SessionState) -> dict[str, str]:
    """Headers sent with every request.

    Authorization and X-DFE-Device-Id are left out entirely until a token or
    GSF id is known. Accept-Language selects the language of descriptions and
    reviews; it does not change which apps the server lists.
    """
    headers: dict[str, str] = {}
    if state.token:
        headers["Authorization"] = authorization(state.token)
    headers["User-Agent"] = state.device.user_agent()
    if state.gsf_id:
        headers["X-DFE-Device-Id"] = state.gsf_id
    headers["Accept-Language"] = state.locale.accept_language
    headers["X-DFE-Encoded-Targets"] = ENCODED_TARGETS
    return headers


def default_get_params(offset: Optional[int] = None, number_of_results: Optional[int] = None) -> dict[str, str]:
    params = {"c": APPS_CATEGORY}
    if offset is not None:
        params["o"] = str(offset)
    if number_of_results is not None:
        params["n"] = str(number_of_results)
    return params


def default_login_params(state: SessionState, email: str, password: str) -> dict[str, str]:
    """Form fields the store app sends on every login."""
    return {
        "Email": email,
        "Passwd": password,
        "accountType": ACCOUNT_TYPE_HOSTED_OR_GOOGLE,
        "has_permission": "1",
        "source": "android",
        "device_country": state.locale.country.lower(),
        "lang": state.locale.language.lower(),
        "sdk_version": str(state.device.sdk_version),
        "client_sig": CLIENT_SIGNATURE,
    }
