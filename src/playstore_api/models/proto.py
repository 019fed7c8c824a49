"""
Binary message schema for the store protocol.

The descriptors are assembled from ``descriptor_pb2`` at import time instead of
shipping generated ``_pb2`` modules. Field numbers match the store's wire
schema, so only the subset of messages and fields this client reads or writes
is declared; unknown fields in server responses are kept by protobuf and
ignored here.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PACKAGE = "playstore"

_F = descriptor_pb2.FieldDescriptorProto
OPTIONAL = _F.LABEL_OPTIONAL
REPEATED = _F.LABEL_REPEATED

_SCALARS = {
    "string": _F.TYPE_STRING,
    "bytes": _F.TYPE_BYTES,
    "bool": _F.TYPE_BOOL,
    "int32": _F.TYPE_INT32,
    "int64": _F.TYPE_INT64,
    "uint64": _F.TYPE_UINT64,
    "fixed64": _F.TYPE_FIXED64,
    "float": _F.TYPE_FLOAT,
}

# message name -> [(field name, number, type, label)]
SCHEMA: dict[str, list[tuple]] = {
    # --- checkin ---
    "AndroidBuildProto": [
        ("id", 1, "string", OPTIONAL),
        ("product", 2, "string", OPTIONAL),
        ("carrier", 3, "string", OPTIONAL),
        ("radio", 4, "string", OPTIONAL),
        ("bootloader", 5, "string", OPTIONAL),
        ("client", 6, "string", OPTIONAL),
        ("timestamp", 7, "int64", OPTIONAL),
        ("googleServices", 8, "int32", OPTIONAL),
        ("device", 9, "string", OPTIONAL),
        ("sdkVersion", 10, "int32", OPTIONAL),
        ("model", 11, "string", OPTIONAL),
        ("manufacturer", 12, "string", OPTIONAL),
        ("buildProduct", 13, "string", OPTIONAL),
        ("otaInstalled", 14, "bool", OPTIONAL),
    ],
    "AndroidCheckinProto": [
        ("build", 1, "AndroidBuildProto", OPTIONAL),
        ("lastCheckinMsec", 2, "int64", OPTIONAL),
        ("cellOperator", 6, "string", OPTIONAL),
        ("simOperator", 7, "string", OPTIONAL),
        ("roaming", 8, "string", OPTIONAL),
        ("userNumber", 9, "int32", OPTIONAL),
    ],
    "DeviceConfigurationProto": [
        ("touchScreen", 1, "int32", OPTIONAL),
        ("keyboard", 2, "int32", OPTIONAL),
        ("navigation", 3, "int32", OPTIONAL),
        ("screenLayout", 4, "int32", OPTIONAL),
        ("hasHardKeyboard", 5, "bool", OPTIONAL),
        ("hasFiveWayNavigation", 6, "bool", OPTIONAL),
        ("screenDensity", 7, "int32", OPTIONAL),
        ("glEsVersion", 8, "int32", OPTIONAL),
        ("systemSharedLibrary", 9, "string", REPEATED),
        ("systemAvailableFeature", 10, "string", REPEATED),
        ("nativePlatform", 11, "string", REPEATED),
        ("screenWidth", 12, "int32", OPTIONAL),
        ("screenHeight", 13, "int32", OPTIONAL),
        ("systemSupportedLocale", 14, "string", REPEATED),
        ("glExtension", 15, "string", REPEATED),
        ("deviceClass", 16, "int32", OPTIONAL),
        ("maxApkDownloadSizeMb", 17, "int32", OPTIONAL),
    ],
    "AndroidCheckinRequest": [
        ("imei", 1, "string", OPTIONAL),
        ("id", 2, "int64", OPTIONAL),
        ("digest", 3, "string", OPTIONAL),
        ("checkin", 4, "AndroidCheckinProto", OPTIONAL),
        ("desiredBuild", 5, "string", OPTIONAL),
        ("locale", 6, "string", OPTIONAL),
        ("loggingId", 7, "int64", OPTIONAL),
        ("marketCheckin", 8, "string", OPTIONAL),
        ("macAddr", 9, "string", REPEATED),
        ("meid", 10, "string", OPTIONAL),
        ("accountCookie", 11, "string", REPEATED),
        ("timeZone", 12, "string", OPTIONAL),
        ("securityToken", 13, "fixed64", OPTIONAL),
        ("version", 14, "int32", OPTIONAL),
        ("otaCert", 15, "string", REPEATED),
        ("serialNumber", 16, "string", OPTIONAL),
        ("esn", 17, "string", OPTIONAL),
        ("deviceConfiguration", 18, "DeviceConfigurationProto", OPTIONAL),
        ("macAddrType", 19, "string", REPEATED),
        ("fragment", 20, "int32", OPTIONAL),
        ("userName", 21, "string", OPTIONAL),
        ("userSerialNumber", 22, "int32", OPTIONAL),
    ],
    "AndroidCheckinResponse": [
        ("statsOk", 1, "bool", OPTIONAL),
        ("timeMsec", 3, "int64", OPTIONAL),
        ("digest", 4, "string", OPTIONAL),
        ("marketOk", 6, "bool", OPTIONAL),
        ("androidId", 7, "fixed64", OPTIONAL),
        ("securityToken", 8, "fixed64", OPTIONAL),
        ("deviceCheckinConsistencyToken", 12, "string", OPTIONAL),
    ],
    # --- documents ---
    "Image": [
        ("imageType", 1, "int32", OPTIONAL),
        ("imageUrl", 5, "string", OPTIONAL),
        ("supportsFifeUrlOptions", 13, "bool", OPTIONAL),
    ],
    "Offer": [
        ("micros", 1, "int64", OPTIONAL),
        ("currencyCode", 2, "string", OPTIONAL),
        ("formattedAmount", 3, "string", OPTIONAL),
        ("checkoutFlowRequired", 5, "bool", OPTIONAL),
        ("offerType", 8, "int32", OPTIONAL),
    ],
    "AppDetails": [
        ("developerName", 1, "string", OPTIONAL),
        ("majorVersionNumber", 2, "int32", OPTIONAL),
        ("versionCode", 3, "int32", OPTIONAL),
        ("versionString", 4, "string", OPTIONAL),
        ("title", 5, "string", OPTIONAL),
        ("appCategory", 7, "string", REPEATED),
        ("contentRating", 8, "int32", OPTIONAL),
        ("installationSize", 9, "int64", OPTIONAL),
        ("permission", 10, "string", REPEATED),
        ("developerEmail", 11, "string", OPTIONAL),
        ("developerWebsite", 12, "string", OPTIONAL),
        ("numDownloads", 13, "string", OPTIONAL),
        ("packageName", 14, "string", OPTIONAL),
        ("recentChangesHtml", 15, "string", OPTIONAL),
        ("uploadDate", 16, "string", OPTIONAL),
    ],
    "DocumentDetails": [
        ("appDetails", 1, "AppDetails", OPTIONAL),
    ],
    "AggregateRating": [
        ("type", 1, "int32", OPTIONAL),
        ("starRating", 2, "float", OPTIONAL),
        ("ratingsCount", 3, "uint64", OPTIONAL),
        ("oneStarRatings", 4, "uint64", OPTIONAL),
        ("twoStarRatings", 5, "uint64", OPTIONAL),
        ("threeStarRatings", 6, "uint64", OPTIONAL),
        ("fourStarRatings", 7, "uint64", OPTIONAL),
        ("fiveStarRatings", 8, "uint64", OPTIONAL),
        ("commentCount", 9, "uint64", OPTIONAL),
    ],
    "DocV2": [
        ("docid", 1, "string", OPTIONAL),
        ("backendDocid", 2, "string", OPTIONAL),
        ("docType", 3, "int32", OPTIONAL),
        ("backendId", 4, "int32", OPTIONAL),
        ("title", 5, "string", OPTIONAL),
        ("creator", 6, "string", OPTIONAL),
        ("descriptionHtml", 7, "string", OPTIONAL),
        ("offer", 8, "Offer", REPEATED),
        ("image", 10, "Image", REPEATED),
        ("child", 11, "DocV2", REPEATED),
        ("details", 13, "DocumentDetails", OPTIONAL),
        ("aggregateRating", 14, "AggregateRating", OPTIONAL),
        ("detailsUrl", 16, "string", OPTIONAL),
        ("shareUrl", 17, "string", OPTIONAL),
        ("reviewsUrl", 18, "string", OPTIONAL),
        ("backendUrl", 19, "string", OPTIONAL),
        ("purchaseDetailsUrl", 20, "string", OPTIONAL),
        ("detailsReusable", 21, "bool", OPTIONAL),
        ("subtitle", 22, "string", OPTIONAL),
    ],
    "Review": [
        ("authorName", 1, "string", OPTIONAL),
        ("url", 2, "string", OPTIONAL),
        ("source", 3, "string", OPTIONAL),
        ("documentVersion", 4, "string", OPTIONAL),
        ("timestampMsec", 5, "int64", OPTIONAL),
        ("starRating", 6, "int32", OPTIONAL),
        ("title", 7, "string", OPTIONAL),
        ("comment", 8, "string", OPTIONAL),
        ("commentId", 9, "string", OPTIONAL),
        ("deviceName", 19, "string", OPTIONAL),
        ("replyText", 29, "string", OPTIONAL),
        ("replyTimestampMsec", 30, "int64", OPTIONAL),
    ],
    # --- responses ---
    "GetReviewsResponse": [
        ("review", 1, "Review", REPEATED),
        ("matchingCount", 2, "int64", OPTIONAL),
    ],
    "ReviewResponse": [
        ("getResponse", 1, "GetReviewsResponse", OPTIONAL),
        ("nextPageUrl", 2, "string", OPTIONAL),
        ("updatedReview", 3, "Review", OPTIONAL),
    ],
    "DetailsResponse": [
        ("analyticsCookie", 2, "string", OPTIONAL),
        ("userReview", 3, "Review", OPTIONAL),
        ("docV2", 4, "DocV2", OPTIONAL),
        ("footerHtml", 5, "string", OPTIONAL),
    ],
    "BulkDetailsRequest": [
        ("docid", 1, "string", REPEATED),
        ("includeChildDocs", 2, "bool", OPTIONAL),
    ],
    "BulkDetailsEntry": [
        ("doc", 1, "DocV2", OPTIONAL),
    ],
    "BulkDetailsResponse": [
        ("entry", 1, "BulkDetailsEntry", REPEATED),
    ],
    "ListResponse": [
        ("doc", 2, "DocV2", REPEATED),
    ],
    "BrowseLink": [
        ("name", 1, "string", OPTIONAL),
        ("dataUrl", 3, "string", OPTIONAL),
    ],
    "BrowseResponse": [
        ("contentsUrl", 1, "string", OPTIONAL),
        ("promoUrl", 2, "string", OPTIONAL),
        ("category", 3, "BrowseLink", REPEATED),
        ("breadcrumb", 4, "BrowseLink", REPEATED),
    ],
    "HttpCookie": [
        ("name", 1, "string", OPTIONAL),
        ("value", 2, "string", OPTIONAL),
    ],
    "AndroidAppDeliveryData": [
        ("downloadSize", 1, "int64", OPTIONAL),
        ("signature", 2, "string", OPTIONAL),
        ("downloadUrl", 3, "string", OPTIONAL),
        ("downloadAuthCookie", 5, "HttpCookie", REPEATED),
        ("forwardLocked", 6, "bool", OPTIONAL),
        ("refundTimeout", 7, "int64", OPTIONAL),
        ("serverInitiated", 8, "bool", OPTIONAL),
        ("postInstallRefundWindowMillis", 9, "int64", OPTIONAL),
        ("immediateStartNeeded", 10, "bool", OPTIONAL),
    ],
    "PurchaseStatusResponse": [
        ("status", 1, "int32", OPTIONAL),
        ("statusMsg", 2, "string", OPTIONAL),
        ("statusTitle", 3, "string", OPTIONAL),
        ("briefMessage", 4, "string", OPTIONAL),
        ("infoUrl", 5, "string", OPTIONAL),
        ("appDeliveryData", 8, "AndroidAppDeliveryData", OPTIONAL),
    ],
    "BuyResponse": [
        ("purchaseStatusResponse", 3, "PurchaseStatusResponse", OPTIONAL),
        ("downloadToken", 55, "string", OPTIONAL),
    ],
    "DeliveryResponse": [
        ("status", 1, "int32", OPTIONAL),
        ("appDeliveryData", 2, "AndroidAppDeliveryData", OPTIONAL),
    ],
    "UploadDeviceConfigRequest": [
        ("deviceConfiguration", 1, "DeviceConfigurationProto", OPTIONAL),
        ("manufacturer", 2, "string", OPTIONAL),
        ("gcmRegistrationId", 3, "string", OPTIONAL),
    ],
    "UploadDeviceConfigResponse": [
        ("uploadDeviceConfigToken", 1, "string", OPTIONAL),
    ],
    "PackageNameContainer": [
        ("packageName", 1, "string", OPTIONAL),
    ],
    "SearchSuggestEntry": [
        ("type", 1, "int32", OPTIONAL),
        ("suggestedQuery", 2, "string", OPTIONAL),
        ("title", 5, "string", OPTIONAL),
        ("packageNameContainer", 8, "PackageNameContainer", OPTIONAL),
    ],
    "SearchSuggestResponse": [
        ("entry", 1, "SearchSuggestEntry", REPEATED),
    ],
    # --- envelope ---
    "Payload": [
        ("listResponse", 1, "ListResponse", OPTIONAL),
        ("detailsResponse", 2, "DetailsResponse", OPTIONAL),
        ("reviewResponse", 3, "ReviewResponse", OPTIONAL),
        ("buyResponse", 4, "BuyResponse", OPTIONAL),
        ("browseResponse", 7, "BrowseResponse", OPTIONAL),
        ("bulkDetailsResponse", 19, "BulkDetailsResponse", OPTIONAL),
        ("deliveryResponse", 21, "DeliveryResponse", OPTIONAL),
        ("uploadDeviceConfigResponse", 28, "UploadDeviceConfigResponse", OPTIONAL),
        ("searchSuggestResponse", 40, "SearchSuggestResponse", OPTIONAL),
    ],
    "PreFetch": [
        ("url", 1, "string", OPTIONAL),
        ("response", 2, "ResponseWrapper", OPTIONAL),
        ("etag", 3, "string", OPTIONAL),
        ("ttl", 4, "int64", OPTIONAL),
        ("softTtl", 5, "int64", OPTIONAL),
    ],
    "ResponseWrapper": [
        ("payload", 1, "Payload", OPTIONAL),
        ("preFetch", 3, "PreFetch", REPEATED),
    ],
}

# Messages whose fields all belong to a single oneof.
ONEOFS = {"Payload": "kind"}


def _file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="playstore_api/store.proto", package=PACKAGE, syntax="proto2",
    )
    for message_name, fields in SCHEMA.items():
        message = file_proto.message_type.add(name=message_name)
        oneof = ONEOFS.get(message_name)
        if oneof:
            message.oneof_decl.add(name=oneof)
        for name, number, type_, label in fields:
            field = message.field.add(name=name, number=number, label=label)
            if type_ in _SCALARS:
                field.type = _SCALARS[type_]
            else:
                field.type = _F.TYPE_MESSAGE
                field.type_name = f".{PACKAGE}.{type_}"
            if oneof:
                field.oneof_index = 0
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_file_descriptor().SerializeToString())


def message_class(name: str) -> type:
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.{name}"))


AndroidBuildProto = message_class("AndroidBuildProto")
AndroidCheckinProto = message_class("AndroidCheckinProto")
DeviceConfigurationProto = message_class("DeviceConfigurationProto")
AndroidCheckinRequest = message_class("AndroidCheckinRequest")
AndroidCheckinResponse = message_class("AndroidCheckinResponse")
DocV2 = message_class("DocV2")
Review = message_class("Review")
GetReviewsResponse = message_class("GetReviewsResponse")
ReviewResponse = message_class("ReviewResponse")
DetailsResponse = message_class("DetailsResponse")
BulkDetailsRequest = message_class("BulkDetailsRequest")
BulkDetailsResponse = message_class("BulkDetailsResponse")
ListResponse = message_class("ListResponse")
BrowseResponse = message_class("BrowseResponse")
BuyResponse = message_class("BuyResponse")
DeliveryResponse = message_class("DeliveryResponse")
UploadDeviceConfigRequest = message_class("UploadDeviceConfigRequest")
UploadDeviceConfigResponse = message_class("UploadDeviceConfigResponse")
SearchSuggestResponse = message_class("SearchSuggestResponse")
Payload = message_class("Payload")
PreFetch = message_class("PreFetch")
ResponseWrapper = message_class("ResponseWrapper")
