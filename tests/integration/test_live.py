"""
Integration tests against the live store.

Requires environment variables:
  PLAYSTORE_TOKEN   — saved auth token
  PLAYSTORE_GSF_ID  — saved GSF id from checkin
  PLAYSTORE_LOCALE  — (optional) defaults to en_US

Run: PLAYSTORE_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest

from playstore_api import PayloadKind, PlayStoreAPI, ReviewSort, ReviewsQuery
from playstore_api.transport.envelope import payload_kind

SKIP = not os.environ.get("PLAYSTORE_INTEGRATION")
TOKEN = os.environ.get("PLAYSTORE_TOKEN", "")
GSF_ID = os.environ.get("PLAYSTORE_GSF_ID", "")
LOCALE = os.environ.get("PLAYSTORE_LOCALE", "en_US")

pytestmark = pytest.mark.skipif(SKIP, reason="PLAYSTORE_INTEGRATION not set")

PACKAGE = "com.google.android.apps.maps"


@pytest.fixture
def client():
    with PlayStoreAPI(token=TOKEN, gsf_id=GSF_ID, locale=LOCALE) as api:
        yield api


class TestCatalog:
    def test_details(self, client):
        details = client.catalog.details(PACKAGE)
        assert details.docV2.docid == PACKAGE
        assert details.docV2.details.appDetails.versionCode > 0

    def test_bulk_details(self, client):
        response = client.catalog.bulk_details([PACKAGE, "com.google.android.youtube"])
        assert len(response.entry) == 2

    def test_reviews(self, client):
        response = client.catalog.reviews(PACKAGE, ReviewsQuery(sort=ReviewSort.HELPFUL, number_of_results=5))
        assert len(response.getResponse.review) <= 5

    def test_categories(self, client):
        assert len(client.catalog.categories().category) > 0

    def test_search_suggest(self, client):
        assert len(client.catalog.search_suggest("maps").entry) > 0

    def test_search(self, client):
        assert payload_kind(client.catalog.search("maps")) != PayloadKind.DETAILS
