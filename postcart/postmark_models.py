"""Webhook payloads that Postmark posts for inbound, bounce, delivery and spam events."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected an object, got {type(data).__name__}")
    return data


def _field(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if (kind is int and isinstance(value, bool)) or not isinstance(value, kind):
        raise ValueError(
            f"field {key!r}: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    return _field(data, key, str, "")


def _int(data: Mapping[str, Any], key: str) -> int:
    return _field(data, key, int, 0)


def _bool(data: Mapping[str, Any], key: str) -> bool:
    return _field(data, key, bool, False)


def _metadata(data: Mapping[str, Any], key: str) -> dict[str, str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ValueError(f"field {key!r}: expected an object of strings")
    return dict(value)


def _items(data: Mapping[str, Any], key: str, cls: Any) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected a list, got {type(value).__name__}")
    return [cls.from_dict(item) for item in value]


@dataclass
class EmailAddressFull:
    """A parsed address from an inbound message."""

    email: str = ""
    name: str = ""
    mailbox_hash: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EmailAddressFull:
        data = _require_mapping(data, "email address")
        return cls(
            email=_str(data, "Email"),
            name=_str(data, "Name"),
            mailbox_hash=_str(data, "MailboxHash"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"Email": self.email, "Name": self.name, "MailboxHash": self.mailbox_hash}


@dataclass
class EmailAttachment:
    """A base64-encoded attachment."""

    name: str = ""
    content: str = ""
    content_id: str = ""
    content_type: str = ""
    content_length: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> EmailAttachment:
        data = _require_mapping(data, "attachment")
        return cls(
            name=_str(data, "Name"),
            content=_str(data, "Content"),
            content_id=_str(data, "ContentID"),
            content_type=_str(data, "ContentType"),
            content_length=_int(data, "ContentLength"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "Content": self.content,
            "ContentID": self.content_id,
            "ContentType": self.content_type,
            "ContentLength": self.content_length,
        }


@dataclass
class EmailHeader:
    """A single message header."""

    name: str = ""
    value: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EmailHeader:
        data = _require_mapping(data, "header")
        return cls(name=_str(data, "Name"), value=_str(data, "Value"))

    def to_dict(self) -> dict[str, Any]:
        return {"Name": self.name, "Value": self.value}


@dataclass
class InboundData:
    """An inbound message forwarded by the inbound webhook."""

    from_name: str = ""
    from_address: str = ""
    from_full: EmailAddressFull = field(default_factory=EmailAddressFull)
    to: str = ""
    to_full: list[EmailAddressFull] = field(default_factory=list)
    cc: str = ""
    cc_full: list[EmailAddressFull] = field(default_factory=list)
    bcc: str = ""
    bcc_full: list[EmailAddressFull] = field(default_factory=list)
    original_recipient: str = ""
    subject: str = ""
    message_id: str = ""
    reply_to: str = ""
    mailbox_hash: str = ""
    date: str = ""
    text_body: str = ""
    html_body: str = ""
    stripped_text_reply: str = ""
    tag: str = ""
    message_stream: str = ""
    headers: list[EmailHeader] = field(default_factory=list)
    attachments: list[EmailAttachment] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> InboundData:
        data = _require_mapping(data, "inbound message")
        from_full = data.get("FromFull")
        return cls(
            from_name=_str(data, "FromName"),
            from_address=_str(data, "From"),
            from_full=(
                EmailAddressFull() if from_full is None else EmailAddressFull.from_dict(from_full)
            ),
            to=_str(data, "To"),
            to_full=_items(data, "ToFull", EmailAddressFull),
            cc=_str(data, "Cc"),
            cc_full=_items(data, "CcFull", EmailAddressFull),
            bcc=_str(data, "Bcc"),
            bcc_full=_items(data, "BccFull", EmailAddressFull),
            original_recipient=_str(data, "OriginalRecipient"),
            subject=_str(data, "Subject"),
            message_id=_str(data, "MessageID"),
            reply_to=_str(data, "ReplyTo"),
            mailbox_hash=_str(data, "MailboxHash"),
            date=_str(data, "Date"),
            text_body=_str(data, "TextBody"),
            html_body=_str(data, "HtmlBody"),
            stripped_text_reply=_str(data, "StrippedTextReply"),
            tag=_str(data, "Tag"),
            message_stream=_str(data, "MessageStream"),
            headers=_items(data, "Headers", EmailHeader),
            attachments=_items(data, "Attachments", EmailAttachment),
        )


@dataclass
class _BounceRecord:
    record_type: str = ""
    message_stream: str = ""
    id: int = 0
    type: str = ""
    type_code: int = 0
    name: str = ""
    tag: str = ""
    message_id: str = ""
    metadata: dict[str, str] | None = None
    server_id: int = 0
    description: str = ""
    details: str = ""
    email: str = ""
    from_address: str = ""
    bounced_at: str = ""
    dump_available: bool = False
    inactive: bool = False
    can_activate: bool = False
    subject: str = ""
    content: str = ""


def _bounce_fields(data: Any, what: str) -> dict[str, Any]:
    data = _require_mapping(data, what)
    return {
        "record_type": _str(data, "RecordType"),
        "message_stream": _str(data, "MessageStream"),
        "id": _int(data, "ID"),
        "type": _str(data, "Type"),
        "type_code": _int(data, "TypeCode"),
        "name": _str(data, "Name"),
        "tag": _str(data, "Tag"),
        "message_id": _str(data, "MessageID"),
        "metadata": _metadata(data, "Metadata"),
        "server_id": _int(data, "ServerID"),
        "description": _str(data, "Description"),
        "details": _str(data, "Details"),
        "email": _str(data, "Email"),
        "from_address": _str(data, "From"),
        "bounced_at": _str(data, "BouncedAt"),
        "dump_available": _bool(data, "DumpAvailable"),
        "inactive": _bool(data, "Inactive"),
        "can_activate": _bool(data, "CanActivate"),
        "subject": _str(data, "Subject"),
        "content": _str(data, "Content"),
    }


class BounceData(_BounceRecord):
    """A bounce reported by the bounce webhook."""

    @classmethod
    def from_dict(cls, data: Any) -> BounceData:
        return cls(**_bounce_fields(data, "bounce record"))


class SpamComplaintData(_BounceRecord):
    """A spam complaint reported by the spam complaint webhook."""

    @classmethod
    def from_dict(cls, data: Any) -> SpamComplaintData:
        return cls(**_bounce_fields(data, "spam complaint record"))


@dataclass
class DeliveredData:
    """A delivery confirmation reported by the delivery webhook."""

    record_type: str = ""
    server_id: int = 0
    message_stream: str = ""
    message_id: str = ""
    recipient: str = ""
    tag: str = ""
    delivered_at: str = ""
    details: str = ""
    metadata: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> DeliveredData:
        data = _require_mapping(data, "delivery record")
        return cls(
            record_type=_str(data, "RecordType"),
            server_id=_int(data, "ServerID"),
            message_stream=_str(data, "MessageStream"),
            message_id=_str(data, "MessageID"),
            recipient=_str(data, "Recipient"),
            tag=_str(data, "Tag"),
            delivered_at=_str(data, "DeliveredAt"),
            details=_str(data, "Details"),
            metadata=_metadata(data, "Metadata"),
        )