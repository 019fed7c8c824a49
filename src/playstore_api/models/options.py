"""
Query constants and option structures for catalog operations.

Every optional field left as None is omitted from the request query string.
"""

from typing import Optional

from pydantic import BaseModel


class ReviewSort:
    NEWEST = 0
    HIGHRATING = 1
    HELPFUL = 4


class RecommendationType:
    ALSO_VIEWED = 1
    ALSO_INSTALLED = 2


class SearchSuggestionType:
    SEARCH_STRING = 2
    APP = 3


class Subcategory:
    TOP_FREE = "apps_topselling_free"
    TOP_GROSSING = "apps_topgrossing"
    MOVERS_SHAKERS = "apps_movers_shakers"


class ReviewsQuery(BaseModel):
    """rev endpoint options.

    The server tends to reject ``number_of_results`` above 20. ``version_code``
    limits reviews to one app version.
    """
    sort: Optional[int] = None
    offset: Optional[int] = None
    number_of_results: Optional[int] = None
    version_code: Optional[int] = None


class BrowseQuery(BaseModel):
    """browse endpoint options. Empty strings are treated like None."""
    category: Optional[str] = None
    subcategory: Optional[str] = None


class ListQuery(BaseModel):
    """list endpoint options."""
    category: Optional[str] = None
    subcategory: Optional[str] = None
    offset: Optional[int] = None
    number_of_results: Optional[int] = None


class RecommendationsQuery(BaseModel):
    """rec endpoint options."""
    type: Optional[int] = RecommendationType.ALSO_VIEWED
    offset: Optional[int] = None
    number_of_results: Optional[int] = None
