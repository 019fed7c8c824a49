"""Catalog operations against a recorded transport."""

import pytest

from playstore_api import (
    AuthenticationError,
    BrowseQuery,
    DecodeError,
    ListQuery,
    RecommendationsQuery,
    ReviewSort,
    ReviewsQuery,
    SearchSuggestionType,
    Subcategory,
    TransportError,
)
from playstore_api.models import proto
from playstore_api.transport.request import UPLOAD_DEVICE_CONFIG_HEADERS


def wrap(**payload) -> bytes:
    return proto.ResponseWrapper(payload=proto.Payload(**payload)).SerializeToString()


class TestDetails:
    def test_details_merges_prefetch(self, api, recorder):
        wrapper = proto.ResponseWrapper(
            payload=proto.Payload(detailsResponse=proto.DetailsResponse(
                docV2=proto.DocV2(docid="com.example.app"),
            )),
            preFetch=[
                proto.PreFetch(url="rec", response=proto.ResponseWrapper(payload=proto.Payload(
                    listResponse=proto.ListResponse(doc=[proto.DocV2(docid="com.example.other")]),
                ))),
                proto.PreFetch(url="rev", response=proto.ResponseWrapper(payload=proto.Payload(
                    reviewResponse=proto.ReviewResponse(getResponse=proto.GetReviewsResponse(
                        review=[proto.Review(comment="mine", starRating=4)],
                    )),
                ))),
            ],
        )
        recorder.reply(wrapper.SerializeToString())

        details = api.catalog.details("com.example.app")

        assert details.docV2.child[0].docid == "com.example.other"
        assert details.userReview.comment == "mine"
        request = recorder.last
        assert request.method == "GET"
        assert request.url.path == "/fdfe/details"
        assert recorder.query(request) == {"doc": "com.example.app"}
        assert request.headers["Authorization"] == "GoogleLogin auth=tok3n"
        assert request.headers["X-DFE-Device-Id"] == "1a2b"
        assert request.headers["Accept-Language"] == "en-US"

    def test_details_without_prefetch(self, api, recorder):
        recorder.reply(wrap(detailsResponse=proto.DetailsResponse(docV2=proto.DocV2(docid="com.example.app"))))
        details = api.catalog.details("com.example.app")
        assert details.docV2.docid == "com.example.app"
        assert len(details.docV2.child) == 0
        assert not details.HasField("userReview")

    def test_undecodable_body_raises_decode_error(self, api, recorder):
        recorder.reply(b"\x0a\x05ab")
        with pytest.raises(DecodeError):
            api.catalog.details("com.example.app")

    def test_http_error_raises_transport_error(self, api, recorder):
        recorder.reply(b"Unauthorized", status_code=401)
        with pytest.raises(TransportError) as exc_info:
            api.catalog.details("com.example.app")
        assert exc_info.value.status_code == 401

    def test_requires_checked_in_device(self, make_api, recorder):
        api = make_api(token="tok3n")
        with pytest.raises(AuthenticationError):
            api.catalog.details("com.example.app")
        assert recorder.requests == []


def test_bulk_details_posts_protobuf(api, recorder):
    recorder.reply(wrap(bulkDetailsResponse=proto.BulkDetailsResponse(entry=[
        {"doc": {"docid": "a"}}, {"doc": {"docid": "b"}},
    ])))

    response = api.catalog.bulk_details(["a", "b"])

    assert [entry.doc.docid for entry in response.entry] == ["a", "b"]
    request = recorder.last
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/x-protobuf"
    assert list(proto.BulkDetailsRequest.FromString(request.content).docid) == ["a", "b"]


def test_search_suggest_params(api, recorder):
    recorder.reply(wrap(searchSuggestResponse=proto.SearchSuggestResponse(entry=[{"suggestedQuery": "maps"}])))

    response = api.catalog.search_suggest("ma", SearchSuggestionType.APP)

    assert response.entry[0].suggestedQuery == "maps"
    assert recorder.query(recorder.last) == {"c": "3", "q": "ma", "ssis": "120", "sst": "3"}


def test_browse_omits_empty_filters(api, recorder):
    recorder.reply(wrap(browseResponse=proto.BrowseResponse(contentsUrl="list?c=3")))
    api.catalog.browse(BrowseQuery(category="GAME", subcategory=""))
    assert recorder.query(recorder.last) == {"c": "3", "cat": "GAME"}

    api.catalog.browse()
    assert recorder.query(recorder.last) == {"c": "3"}


def test_categories(api, recorder):
    recorder.reply(wrap(browseResponse=proto.BrowseResponse(category=[{"name": "Games", "dataUrl": "browse?cat=GAME"}])))
    response = api.catalog.categories("GAME")
    assert response.category[0].name == "Games"
    assert recorder.last.url.path == "/fdfe/categories"
    assert recorder.query(recorder.last) == {"c": "3", "cat": "GAME"}


def test_list_documents(api, recorder):
    recorder.reply(wrap(listResponse=proto.ListResponse(doc=[{"docid": "top"}])))
    response = api.catalog.list_documents(ListQuery(
        category="GAME", subcategory=Subcategory.TOP_FREE, offset=20, number_of_results=10,
    ))
    assert response.doc[0].docid == "top"
    assert recorder.query(recorder.last) == {
        "c": "3", "cat": "GAME", "ctr": "apps_topselling_free", "o": "20", "n": "10",
    }


def test_purchase_posts_form(api, recorder):
    recorder.reply(wrap(buyResponse=proto.BuyResponse(purchaseStatusResponse={
        "appDeliveryData": {"downloadUrl": "https://dl.example/app.apk"},
    })))

    response = api.catalog.purchase("com.example.app", 42)

    assert response.purchaseStatusResponse.appDeliveryData.downloadUrl == "https://dl.example/app.apk"
    request = recorder.last
    assert request.method == "POST"
    assert recorder.form(request) == {"ot": "1", "doc": "com.example.app", "vc": "42"}


def test_delivery_gets(api, recorder):
    recorder.reply(wrap(deliveryResponse=proto.DeliveryResponse(status=1)))
    assert api.catalog.delivery("com.example.app", 42, offer_type=2).status == 1
    assert recorder.last.method == "GET"
    assert recorder.query(recorder.last) == {"ot": "2", "doc": "com.example.app", "vc": "42"}


def test_reviews_params(api, recorder):
    recorder.reply(wrap(reviewResponse=proto.ReviewResponse(nextPageUrl="rev?o=20")))
    response = api.catalog.reviews("com.example.app", ReviewsQuery(
        sort=ReviewSort.HELPFUL, offset=0, number_of_results=20, version_code=7,
    ))
    assert response.nextPageUrl == "rev?o=20"
    assert recorder.query(recorder.last) == {
        "c": "3", "o": "0", "n": "20", "vc": "7", "doc": "com.example.app", "sort": "4",
    }

    api.catalog.reviews("com.example.app")
    assert recorder.query(recorder.last) == {"c": "3", "doc": "com.example.app"}


def test_add_review_uses_query_string(api, recorder):
    recorder.reply(wrap(reviewResponse=proto.ReviewResponse(updatedReview={"comment": "nice"})))
    response = api.catalog.add_or_edit_review("com.example.app", "nice", "Title", 5)
    assert response.updatedReview.comment == "nice"
    request = recorder.last
    assert request.method == "POST"
    assert request.content == b""
    assert recorder.query(request) == {"doc": "com.example.app", "title": "Title", "content": "nice", "rating": "5"}


def test_delete_review(api, recorder):
    assert api.catalog.delete_review("com.example.app") is None
    assert recorder.last.url.path == "/fdfe/deleteReview"
    assert recorder.form(recorder.last) == {"doc": "com.example.app"}


def test_upload_device_config_sends_extra_headers(api, recorder):
    recorder.reply(wrap(uploadDeviceConfigResponse=proto.UploadDeviceConfigResponse(uploadDeviceConfigToken="t")))

    response = api.catalog.upload_device_config()

    assert response.uploadDeviceConfigToken == "t"
    request = recorder.last
    for name, value in UPLOAD_DEVICE_CONFIG_HEADERS.items():
        assert request.headers[name] == value
    sent = proto.UploadDeviceConfigRequest.FromString(request.content)
    assert sent.deviceConfiguration.screenDensity == 420


def test_recommendations(api, recorder):
    recorder.reply(wrap(listResponse=proto.ListResponse(doc=[{"docid": "similar"}])))
    response = api.catalog.recommendations("com.example.app", RecommendationsQuery(offset=0, number_of_results=5))
    assert response.doc[0].docid == "similar"
    assert recorder.query(recorder.last) == {"c": "3", "o": "0", "n": "5", "doc": "com.example.app", "rt": "1"}


class TestGenericGet:
    def test_adds_category_default(self, api, recorder):
        recorder.reply(wrap(listResponse=proto.ListResponse(doc=[{"docid": "x"}])))
        payload = api.catalog.generic_get("https://android.clients.google.com/fdfe/list", {"ctr": "abc"})
        assert payload.listResponse.doc[0].docid == "x"
        assert recorder.query(recorder.last) == {"ctr": "abc", "c": "3"}

    def test_keeps_caller_category(self, api, recorder):
        api.catalog.generic_get("https://android.clients.google.com/fdfe/list", {"c": "1"})
        assert recorder.query(recorder.last) == {"c": "1"}

    def test_resolves_relative_server_urls(self, api, recorder):
        api.catalog.generic_get("list?c=3&ctr=apps_topgrossing&o=20")
        request = recorder.last
        assert request.url.path == "/fdfe/list"
        assert recorder.query(request) == {"c": "3", "ctr": "apps_topgrossing", "o": "20"}
        assert request.url.params.get_list("c") == ["3"]

    def test_keeps_query_of_absolute_next_page_url(self, api, recorder):
        api.catalog.generic_get("https://android.clients.google.com/fdfe/list?ctr=apps_topgrossing&o=20")
        request = recorder.last
        assert request.url.path == "/fdfe/list"
        assert recorder.query(request) == {"ctr": "apps_topgrossing", "o": "20", "c": "3"}

    def test_params_override_url_query(self, api, recorder):
        api.catalog.generic_get("list?c=1&o=20", {"o": "40"})
        assert recorder.query(recorder.last) == {"c": "1", "o": "40"}

    def test_malformed_url_raises_transport_error(self, api, recorder):
        with pytest.raises(TransportError):
            api.catalog.generic_get("https://android.clients.google.com/fdfe/list\x00")
        assert recorder.requests == []

    def test_search(self, api, recorder):
        api.catalog.search("maps")
        assert recorder.last.url.path == "/fdfe/search"
        assert recorder.query(recorder.last) == {"q": "maps", "c": "3"}
