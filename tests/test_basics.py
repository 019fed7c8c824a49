"""Basic unit tests for playstore-api package."""

from playstore_api import (
    PlayStoreAPI,
    PlayStoreError,
    TransportError,
    DecodeError,
    AuthenticationError,
    PayloadKind,
    ReviewSort,
    RecommendationType,
    SearchSuggestionType,
    Subcategory,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert PlayStoreAPI is not None


def test_error_hierarchy():
    assert issubclass(TransportError, PlayStoreError)
    assert issubclass(DecodeError, PlayStoreError)
    assert issubclass(AuthenticationError, PlayStoreError)


def test_error_attributes():
    err = PlayStoreError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    auth_err = AuthenticationError("Authentication failed! (login)", details={"error": "BadAuthentication"})
    assert auth_err.code == "auth_error"
    assert auth_err.details == {"error": "BadAuthentication"}

    transport_err = TransportError("HTTP 503: busy", status_code=503)
    assert transport_err.code == "transport_error"
    assert transport_err.status_code == 503

    assert DecodeError("bad bytes").code == "decode_error"


def test_constants():
    assert ReviewSort.HELPFUL == 4
    assert RecommendationType.ALSO_INSTALLED == 2
    assert SearchSuggestionType.SEARCH_STRING == 2
    assert Subcategory.TOP_FREE == "apps_topselling_free"
    assert PayloadKind.DETAILS == "detailsResponse"
