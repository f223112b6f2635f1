"""Errors reported by the Postmark API, keyed by their numeric error codes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

UNKNOWN_ERROR_DESCRIPTION = "unknown Postmark error code"
NO_MESSAGE = "no further message provided"

ERROR_DESCRIPTIONS: Mapping[int, str] = MappingProxyType(
    {
        10: "bad or missing API token",
        11: "multiple errors occurred",
        12: "resource not found",
        13: "invalid pagination key",
        100: "Postmark API is offline for maintenance",
        300: "invalid email request",
        400: "sender signature not found",
        401: "sender signature not confirmed",
        402: "invalid JSON",
        403: "invalid request fields",
        405: "not allowed to send",
        406: "inactive recipient",
        409: "JSON required",
        410: "too many batch messages",
        411: "forbidden attachment type",
        412: "account is pending",
        413: "account may not send",
        500: "sender signature query exception",
        501: "sender signature not found by id",
        502: "no updated sender signature data received",
        503: "cannot use a public domain",
        504: "sender signature already exists",
        505: "DKIM already scheduled for renewal",
        506: "sender signature already confirmed",
        507: "you do not own this sender signature",
        510: "domain was not found",
        511: "invalid fields supplied",
        512: "domain already exists",
        513: "you do not own this domain",
        514: "name is a required field to create a domain",
        515: "name field must be less than or equal to 255 characters",
        516: "name format is invalid",
        520: "missing a required field to create a sender signature",
        521: "a field in the sender signature request is too long",
        522: "value for field is invalid",
        600: "server query exception",
        602: "duplicate inbound domain",
        603: "server name already exists",
        604: "you don\u2019t have delete access",
        605: "unable to delete server",
        606: "invalid webhook URL",
        607: "invalid server color",
        608: "server name missing or invalid",
        609: "no updated server data received",
        610: "invalid MX record for inbound domain",
        611: "InboundSpamThreshold value is invalid",
        700: "messages query exception",
        701: "message doesn\u2019t exist",
        702: "could not bypass this blocked inbound message",
        703: "could not retry this failed inbound message",
        800: "trigger query exception",
        809: "no trigger data received",
        810: "this inbound rule already exists",
        811: "unable to remove this inbound rule",
        812: "this inbound rule was not found",
        813: "not a valid email address or domain",
        900: "stats query exception",
        1000: "bounces query exception",
        1001: "bounce was not found",
        1002: "BounceID parameter required",
        1003: "cannot activate bounce",
        1100: "template query exception",
        1101: "template not found",
        1105: "template limit would be exceeded",
        1109: "no template data received",
        1120: "a required template field is missing",
        1121: "template field is too large",
        1122: "a templated field is invalid",
        1123: "a field was included in the request that is not allowed",
        1125: "the template types don't match on the source and destination servers",
        1130: "the layout template cannot be deleted because it has dependent templates",
        1131: "the layout content placeholder must be present exactly once",
        1221: "invalid MessageStreamType",
        1222: "a valid ID must be provided",
        1223: "a valid Name must be provided",
        1224: "the Name is too long, limited to 100 characters",
        1225: "maximum number of message streams reached",
        1226: "the message stream for the provided ID was not found",
        1227: "the ID must be a non-empty string starting with a letter",
        1228: "a server can only have one inbound stream",
        1229: "cannot archive the default transactional and inbound streams",
        1230: "the ID provided already exists for this server",
        1231: "the Description is too long, limited to 1000 characters",
        1232: "cannot unarchive this message stream anymore",
        1233: "the ID must not start with the 'pm-' prefix",
        1234: "the Description must not contain HTML tags",
        1235: "the MessageStream provided does not exist on this server",
        1236: "sending is not supported on the supplied MessageStream",
        1237: "the ID 'all' is reserved",
        1300: "invalid data removal request",
        1301: "invalid data removal request ID",
        1302: "you don\u2019t have data removal request access",
    }
)


class PostmarkError(Exception):
    """An error code returned by the Postmark API, with an optional detail message."""

    def __init__(self, code: int, description: str, message: str | None = None) -> None:
        self.code = code
        self.description = description
        self.message = message
        text = description if message is None else f"{description}: {message}"
        super().__init__(text)

    @property
    def is_known(self) -> bool:
        """True when the code is one that Postmark documents."""
        return self.code in ERROR_DESCRIPTIONS


def error_for_code(code: int) -> PostmarkError:
    """Return the error for a Postmark error code."""
    return PostmarkError(code, ERROR_DESCRIPTIONS.get(code, UNKNOWN_ERROR_DESCRIPTION))


def error_with_message(code: int, message: str) -> PostmarkError:
    """Return the error for a code, carrying the API's message or a default note."""
    base = error_for_code(code)
    return PostmarkError(code, base.description, message or NO_MESSAGE)