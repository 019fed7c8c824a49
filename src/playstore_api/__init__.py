"""
playstore-api — store catalog client for Python.

Device checkin, account login and catalog calls (details, search, browse,
purchase/delivery, reviews, recommendations) over the store's protobuf API.
"""

from playstore_api.client import PlayStoreAPI
from playstore_api.auth import Auth, CheckinIdentity
from playstore_api.catalog import CatalogAPI
from playstore_api.device import DeviceProfile, DeviceProperties
from playstore_api.errors import PlayStoreError, TransportError, DecodeError, AuthenticationError
from playstore_api.models.options import (
    ReviewSort,
    RecommendationType,
    SearchSuggestionType,
    Subcategory,
    ReviewsQuery,
    BrowseQuery,
    ListQuery,
    RecommendationsQuery,
)
from playstore_api.models.session import Locale, SessionState, SessionStore
from playstore_api.transport.envelope import PayloadKind

__version__ = "0.1.0"
__all__ = [
    "PlayStoreAPI",
    "Auth",
    "CheckinIdentity",
    "CatalogAPI",
    "DeviceProfile",
    "DeviceProperties",
    "PlayStoreError",
    "TransportError",
    "DecodeError",
    "AuthenticationError",
    "ReviewSort",
    "RecommendationType",
    "SearchSuggestionType",
    "Subcategory",
    "ReviewsQuery",
    "BrowseQuery",
    "ListQuery",
    "RecommendationsQuery",
    "Locale",
    "SessionState",
    "SessionStore",
    "PayloadKind",
]
