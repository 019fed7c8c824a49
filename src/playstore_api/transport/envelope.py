"""
Response envelope decoding and prefetch merging.

Every fdfe response is a ``ResponseWrapper``: one ``Payload`` (a oneof over the
response kinds) plus zero or more ``PreFetch`` entries, each carrying a nested
``ResponseWrapper`` for a URL the server expects the client to ask for next.
"""

import logging
from typing import Any

from google.protobuf.message import DecodeError as ProtobufDecodeError

from playstore_api.errors import DecodeError
from playstore_api.models import proto

logger = logging.getLogger(__name__)


class PayloadKind:
    LIST = "listResponse"
    DETAILS = "detailsResponse"
    REVIEW = "reviewResponse"
    BUY = "buyResponse"
    BROWSE = "browseResponse"
    BULK_DETAILS = "bulkDetailsResponse"
    DELIVERY = "deliveryResponse"
    UPLOAD_DEVICE_CONFIG = "uploadDeviceConfigResponse"
    SEARCH_SUGGEST = "searchSuggestResponse"
    UNKNOWN = "unknown"


def payload_kind(payload: Any) -> str:
    """Return the PayloadKind tag of a Payload, UNKNOWN when nothing we know is set."""
    return payload.WhichOneof("kind") or PayloadKind.UNKNOWN


def decode_message(message_type: type, raw: bytes) -> Any:
    message = message_type()
    try:
        message.ParseFromString(raw)
    except ProtobufDecodeError as e:
        raise DecodeError(
            f"Failed to decode {message_type.DESCRIPTOR.name}: {e}",
            details={"size": len(raw)},
        ) from e
    return message


def parse_envelope(raw: bytes) -> Any:
    """Decode a ResponseWrapper. Raises DecodeError on malformed bytes."""
    return decode_message(proto.ResponseWrapper, raw)


def merge_prefetch(wrapper: Any) -> Any:
    """Fold prefetched sub-responses into the details document.

    In prefetch order: a list response contributes its first document as a
    child of the primary document; a review response sets the user review
    from its first review (later entries overwrite earlier ones). Any other
    kind is ignored. Returns a new DetailsResponse; ``wrapper`` is untouched.
    """
    details = proto.DetailsResponse()
    details.CopyFrom(wrapper.payload.detailsResponse)
    for prefetch in wrapper.preFetch:
        sub_payload = prefetch.response.payload
        kind = payload_kind(sub_payload)
        if kind == PayloadKind.LIST:
            docs = sub_payload.listResponse.doc
            if docs:
                details.docV2.child.add().CopyFrom(docs[0])
        elif kind == PayloadKind.REVIEW:
            reviews = sub_payload.reviewResponse.getResponse.review
            if reviews:
                details.userReview.CopyFrom(reviews[0])
        else:
            logger.debug("Ignoring %s prefetch for %s", kind, prefetch.url)
    return details
