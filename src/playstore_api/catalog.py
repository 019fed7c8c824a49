"""
Catalog operations over the fdfe endpoints: details, search, browse,
purchase/delivery, reviews and recommendations.
"""

from __future__ import annotations

from typing import Any, Optional

from playstore_api.errors import AuthenticationError
from playstore_api.models import proto
from playstore_api.models.options import (
    BrowseQuery,
    ListQuery,
    RecommendationsQuery,
    ReviewsQuery,
    SearchSuggestionType,
)
from playstore_api.models.session import SessionStore
from playstore_api.transport.envelope import merge_prefetch, parse_envelope
from playstore_api.transport.http import FDFE_URL, HttpClient, split_query
from playstore_api.transport.request import (
    APPS_CATEGORY,
    UPLOAD_DEVICE_CONFIG_HEADERS,
    build_headers,
    default_get_params,
)

LIST_URL = FDFE_URL + "list"
BROWSE_URL = FDFE_URL + "browse"
DETAILS_URL = FDFE_URL + "details"
SEARCH_URL = FDFE_URL + "search"
SEARCHSUGGEST_URL = FDFE_URL + "searchSuggest"
BULKDETAILS_URL = FDFE_URL + "bulkDetails"
PURCHASE_URL = FDFE_URL + "purchase"
DELIVERY_URL = FDFE_URL + "delivery"
REVIEWS_URL = FDFE_URL + "rev"
ADD_REVIEW_URL = FDFE_URL + "addReview"
DELETE_REVIEW_URL = FDFE_URL + "deleteReview"
UPLOADDEVICECONFIG_URL = FDFE_URL + "uploadDeviceConfig"
RECOMMENDATIONS_URL = FDFE_URL + "rec"
CATEGORIES_URL = FDFE_URL + "categories"

SEARCH_SUGGEST_ICON_SIZE = "120"


class CatalogAPI:
    def __init__(self, http: HttpClient, session: SessionStore):
        self._http = http
        self._session = session

    def _headers(self) -> dict[str, str]:
        state = self._session.state
        if not state.gsf_id:
            raise AuthenticationError("Device is not checked in (no GSF id); run checkin first")
        return build_headers(state)

    def _get(self, url: str, params: dict[str, str]) -> Any:
        return parse_envelope(self._http.get(url, params, self._headers()))

    def details(self, package_name: str) -> Any:
        """Details of one app, with prefetched children and user review merged in.

        Use bulk_details for more than one app.
        """
        return merge_prefetch(self._get(DETAILS_URL, {"doc": package_name}))

    def bulk_details(self, package_names: list[str]) -> Any:
        request = proto.BulkDetailsRequest(docid=package_names)
        raw = self._http.post(BULKDETAILS_URL, request.SerializeToString(), self._headers())
        return parse_envelope(raw).payload.bulkDetailsResponse

    def search(self, query: str) -> Any:
        """Full search. Returns the raw Payload; follow next-page URLs with generic_get."""
        return self.generic_get(SEARCH_URL, {"q": query})

    def search_suggest(self, query: str, type: int = SearchSuggestionType.SEARCH_STRING) -> Any:
        """Query completions and the best matching app, as shown while typing."""
        params = default_get_params()
        params["q"] = query
        params["ssis"] = SEARCH_SUGGEST_ICON_SIZE
        params["sst"] = str(type)
        return self._get(SEARCHSUGGEST_URL, params).payload.searchSuggestResponse

    def browse(self, query: Optional[BrowseQuery] = None) -> Any:
        query = query or BrowseQuery()
        params = default_get_params()
        if query.category:
            params["cat"] = query.category
        if query.subcategory:
            params["ctr"] = query.subcategory
        return self._get(BROWSE_URL, params).payload.browseResponse

    def categories(self, category: Optional[str] = None) -> Any:
        """Top level categories, or the subcategories of ``category``."""
        params = default_get_params()
        if category:
            params["cat"] = category
        return self._get(CATEGORIES_URL, params).payload.browseResponse

    def list_documents(self, query: ListQuery) -> Any:
        """Apps of a category/subcategory pair, e.g. top free games."""
        params = default_get_params(query.offset, query.number_of_results)
        if query.category:
            params["cat"] = query.category
        if query.subcategory:
            params["ctr"] = query.subcategory
        return self._get(LIST_URL, params).payload.listResponse

    def purchase(self, package_name: str, version_code: int, offer_type: int = 1) -> Any:
        """Fetch the download URL and cookie. Nothing is charged for free apps."""
        form = {"ot": str(offer_type), "doc": package_name, "vc": str(version_code)}
        raw = self._http.post_form(PURCHASE_URL, form, self._headers())
        return parse_envelope(raw).payload.buyResponse

    def delivery(self, package_name: str, version_code: int, offer_type: int = 1) -> Any:
        """Download info for an app the account already owns.

        Free apps still have to go through purchase, which returns the same
        information.
        """
        params = {"ot": str(offer_type), "doc": package_name, "vc": str(version_code)}
        return self._get(DELIVERY_URL, params).payload.deliveryResponse

    def reviews(self, package_name: str, query: Optional[ReviewsQuery] = None) -> Any:
        query = query or ReviewsQuery()
        params = default_get_params(query.offset, query.number_of_results)
        if query.version_code is not None:
            params["vc"] = str(query.version_code)
        params["doc"] = package_name
        if query.sort is not None:
            params["sort"] = str(query.sort)
        return self._get(REVIEWS_URL, params).payload.reviewResponse

    def add_or_edit_review(self, package_name: str, comment: str, title: str, stars: int) -> Any:
        params = {
            "doc": package_name,
            "title": title,
            "content": comment,
            "rating": str(stars),
        }
        raw = self._http.post_query(ADD_REVIEW_URL, params, self._headers())
        return parse_envelope(raw).payload.reviewResponse

    def delete_review(self, package_name: str) -> None:
        self._http.post_form(DELETE_REVIEW_URL, {"doc": package_name}, self._headers())

    def upload_device_config(self) -> Any:
        """Register the device configuration with the account.

        Without it some apps are missing from search results.
        """
        request = proto.UploadDeviceConfigRequest(
            deviceConfiguration=self._session.state.device.device_configuration(),
        )
        headers = self._headers()
        headers.update(UPLOAD_DEVICE_CONFIG_HEADERS)
        raw = self._http.post(UPLOADDEVICECONFIG_URL, request.SerializeToString(), headers)
        return parse_envelope(raw).payload.uploadDeviceConfigResponse

    def recommendations(self, package_name: str, query: Optional[RecommendationsQuery] = None) -> Any:
        query = query or RecommendationsQuery()
        params = default_get_params(query.offset, query.number_of_results)
        params["doc"] = package_name
        if query.type is not None:
            params["rt"] = str(query.type)
        return self._get(RECOMMENDATIONS_URL, params).payload.listResponse

    def generic_get(self, url: str, params: Optional[dict[str, str]] = None) -> Any:
        """GET a server-provided URL (next page, suggestion, ...) and return its Payload.

        Relative URLs such as ``list?c=3&ctr=...`` resolve against the fdfe root.
        The URL's own query is kept; ``params`` override it and ``c`` defaults
        to the apps category when neither carries one.
        """
        if not url.startswith(("http://", "https://")):
            url = FDFE_URL + url.lstrip("/")
        base, query = split_query(url)
        query.update(params or {})
        query.setdefault("c", APPS_CATEGORY)
        return self._get(base, query).payload
