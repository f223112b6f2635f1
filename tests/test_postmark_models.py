import pytest

from postcart.postmark_models import (
    BounceData,
    DeliveredData,
    EmailAddressFull,
    EmailAttachment,
    EmailHeader,
    InboundData,
    SpamComplaintData,
)

INBOUND = {
    "FromName": "Sender",
    "From": "sender@example.com",
    "FromFull": {"Email": "sender@example.com", "Name": "Sender", "MailboxHash": ""},
    "To": "cards@example.com",
    "ToFull": [{"Email": "cards@example.com", "Name": "Cards", "MailboxHash": "abc"}],
    "Subject": "Hello",
    "MessageID": "msg-1",
    "TextBody": "Wish you were here",
    "Headers": [{"Name": "X-Spam-Status", "Value": "No"}],
    "Attachments": [
        {
            "Name": "photo.jpg",
            "Content": "aGVsbG8=",
            "ContentID": "",
            "ContentType": "image/jpeg",
            "ContentLength": 5,
        }
    ],
}

BOUNCE = {
    "RecordType": "Bounce",
    "MessageStream": "outbound",
    "ID": 4323372036854775807,
    "Type": "HardBounce",
    "TypeCode": 1,
    "Email": "friend@example.com",
    "From": "cards@example.com",
    "Metadata": {"sender_email": "sender@example.com"},
    "Inactive": True,
    "CanActivate": True,
}


def test_inbound_reads_nested_values():
    data = InboundData.from_dict(INBOUND)
    assert data.from_full == EmailAddressFull("sender@example.com", "Sender", "")
    assert data.to_full == [EmailAddressFull("cards@example.com", "Cards", "abc")]
    assert data.headers == [EmailHeader("X-Spam-Status", "No")]
    assert data.attachments[0].content_type == "image/jpeg"
    assert data.attachments[0].content_length == 5
    assert data.text_body == "Wish you were here"
    assert data.from_address == "sender@example.com"


def test_inbound_missing_fields_take_zero_values():
    data = InboundData.from_dict({})
    assert data == InboundData()
    assert data.from_full == EmailAddressFull()
    assert data.to_full == []


def test_null_values_take_zero_values():
    data = DeliveredData.from_dict({"Tag": None, "ServerID": None, "Metadata": None})
    assert data == DeliveredData()


@pytest.mark.parametrize(
    "cls, payload",
    [
        (EmailAddressFull, {"Email": "a@example.com", "Name": "A", "MailboxHash": "h"}),
        (EmailHeader, {"Name": "X-Test", "Value": "yes"}),
        (
            EmailAttachment,
            {
                "Name": "a.txt",
                "Content": "eA==",
                "ContentID": "cid",
                "ContentType": "text/plain",
                "ContentLength": 1,
            },
        ),
    ],
)
def test_round_trip(cls, payload):
    assert cls.from_dict(payload).to_dict() == payload


def test_bounce_reads_metadata():
    data = BounceData.from_dict(BOUNCE)
    assert data.metadata == {"sender_email": "sender@example.com"}
    assert data.email == "friend@example.com"
    assert data.id == BOUNCE["ID"]
    assert data.inactive is True
    assert data.dump_available is False


def test_bounce_without_metadata_has_none():
    payload = {k: v for k, v in BOUNCE.items() if k != "Metadata"}
    assert BounceData.from_dict(payload).metadata is None


def test_spam_complaint_reads_same_fields_as_bounce():
    spam = SpamComplaintData.from_dict(BOUNCE)
    bounce = BounceData.from_dict(BOUNCE)
    assert isinstance(spam, SpamComplaintData)
    assert spam.email == bounce.email
    assert spam.metadata == bounce.metadata
    assert spam != bounce


def test_delivered_reads_fields():
    data = DeliveredData.from_dict(
        {
            "RecordType": "Delivery",
            "ServerID": 23,
            "MessageID": "msg-2",
            "Recipient": "friend@example.com",
            "Metadata": {"card": "1"},
        }
    )
    assert data.recipient == "friend@example.com"
    assert data.server_id == 23
    assert data.metadata == {"card": "1"}


@pytest.mark.parametrize(
    "cls, payload",
    [
        (BounceData, {"ID": "seven"}),
        (BounceData, {"Inactive": 1}),
        (DeliveredData, {"ServerID": True}),
        (DeliveredData, {"Metadata": {"a": 1}}),
        (InboundData, {"ToFull": {"Email": "a@example.com"}}),
        (InboundData, {"FromFull": "a@example.com"}),
    ],
)
def test_wrong_types_raise(cls, payload):
    with pytest.raises(ValueError):
        cls.from_dict(payload)


def test_non_object_raises():
    with pytest.raises(ValueError):
        InboundData.from_dict(["not", "an", "object"])