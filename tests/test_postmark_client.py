import json

import pytest
import requests
import responses
from responses import matchers

from postcart.postmark_client import (
    API_URL,
    DeleteInboundTriggerResponse,
    EmailResponse,
    InboundTriggerRuleResponse,
    NewEmailFromTemplate,
    NewTemplate,
    PostmarkClient,
    PostmarkRequestError,
    TemplateInfo,
    TemplateValidationError,
    TemplateValidationRequest,
)
from postcart.postmark_errors import PostmarkError
from postcart.postmark_models import EmailAttachment, EmailHeader


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def client():
    return PostmarkClient("token")


def test_email_to_dict_omits_empty_fields():
    email = NewEmailFromTemplate("cards@example.com", "friend@example.com", {"name": "Ann"})
    assert email.to_dict() == {
        "From": "cards@example.com",
        "To": "friend@example.com",
        "TemplateModel": {"name": "Ann"},
    }


def test_email_to_dict_includes_set_fields():
    email = NewEmailFromTemplate(
        "cards@example.com",
        "friend@example.com",
        template_model=None,
        template_alias="postcard",
        headers=EmailHeader("X-Card", "1"),
        track_opens=True,
        attachments=[EmailAttachment(name="a.jpg")],
        metadata={"sender_email": "sender@example.com"},
        message_stream="outbound",
    )
    payload = email.to_dict()
    assert payload["TemplateAlias"] == "postcard"
    assert payload["TemplateModel"] is None
    assert payload["Headers"] == {"Name": "X-Card", "Value": "1"}
    assert payload["TrackOpens"] is True
    assert payload["Attachments"][0]["Name"] == "a.jpg"
    assert payload["Metadata"] == {"sender_email": "sender@example.com"}
    assert "TemplateId" not in payload
    assert "Cc" not in payload


def test_new_template_to_dict_omits_optional_fields():
    payload = NewTemplate("Postcard", "postcard", subject="Hi").to_dict()
    assert set(payload) == {"Name", "Alias", "HtmlBody", "TextBody", "Subject"}
    assert payload["Subject"] == "Hi"


def test_validation_request_always_has_layout_template():
    payload = TemplateValidationRequest(subject="Hi {{name}}").to_dict()
    assert payload["LayoutTemplate"] == ""
    assert "InlineCssForHtmlTestRender" not in payload
    assert "TemplateType" not in payload


def test_list_templates(mocked, client):
    mocked.add(
        responses.GET,
        f"{API_URL}/templates",
        match=[matchers.query_param_matcher({"count": "10", "offset": "20"})],
        json={
            "TotalCount": 1,
            "Templates": [
                {
                    "Active": True,
                    "TemplateId": 42,
                    "Name": "Postcard",
                    "Alias": "postcard",
                    "TemplateType": "Standard",
                }
            ],
        },
    )
    result = client.list_templates(10, 20)
    assert result.total_count == 1
    assert result.templates == [
        TemplateInfo(
            active=True,
            template_id=42,
            name="Postcard",
            alias="postcard",
            template_type="Standard",
        )
    ]
    sent = mocked.calls[0].request
    assert sent.headers["X-Postmark-Server-Token"] == "token"
    assert sent.headers["Accepts"] == "application/json"
    assert "Content-Type" not in sent.headers


def test_create_template_sends_json(mocked, client):
    template = NewTemplate("Postcard", "postcard", html_body="<p>Hi</p>")
    mocked.add(
        responses.POST,
        f"{API_URL}/templates",
        json={"Active": True, "TemplateId": 7, "Name": "Postcard", "Alias": "postcard"},
    )
    result = client.create_template(template)
    assert result.template_id == 7
    sent = mocked.calls[0].request
    assert json.loads(sent.body) == template.to_dict()
    assert sent.headers["Content-Type"] == "application/json"


def test_send_with_template_success(mocked, client):
    email = NewEmailFromTemplate("cards@example.com", "friend@example.com", {"a": 1})
    reply = {
        "To": "friend@example.com",
        "SubmittedAt": "2024-01-01T00:00:00Z",
        "MessageID": "abc",
        "ErrorCode": 0,
        "Message": "OK",
    }
    mocked.add(responses.POST, f"{API_URL}/email/withTemplate", json=reply)
    result = client.send_with_template(email)
    assert result == EmailResponse.from_dict(reply)
    assert result.message_id == "abc"
    assert json.loads(mocked.calls[0].request.body) == email.to_dict()


def test_send_with_template_error_code_raises(mocked, client):
    email = NewEmailFromTemplate("cards@example.com", "friend@example.com")
    mocked.add(
        responses.POST,
        f"{API_URL}/email/withTemplate",
        status=422,
        json={"ErrorCode": 406, "Message": "recipient is inactive"},
    )
    with pytest.raises(PostmarkError) as info:
        client.send_with_template(email)
    assert info.value.code == 406
    assert info.value.message == "recipient is inactive"


def test_validate_template(mocked, client):
    mocked.add(
        responses.POST,
        f"{API_URL}/templates/validate",
        json={
            "AllContentIsValid": False,
            "Subject": {
                "ContentIsValid": False,
                "ValidationErrors": [
                    {"Message": "Unexpected token", "Line": 1, "CharacterPosition": 5}
                ],
            },
            "SuggestedTemplateModel": {"name": "name_Value"},
        },
    )
    request = TemplateValidationRequest(subject="Hi {{name", test_render_model={})
    result = client.validate_template(request)
    assert result.all_content_is_valid is False
    assert result.subject.validation_errors == [
        TemplateValidationError("Unexpected token", 1, 5)
    ]
    assert result.html_body.validation_errors == []
    assert result.suggested_template_model == {"name": "name_Value"}
    assert json.loads(mocked.calls[0].request.body)["LayoutTemplate"] == ""


def test_create_inbound_trigger_rule(mocked, client):
    mocked.add(
        responses.POST,
        f"{API_URL}/triggers/inboundrules",
        json={"ID": 7, "Rule": "spam@example.com"},
    )
    result = client.create_inbound_trigger_rule("spam@example.com")
    assert result == InboundTriggerRuleResponse(id=7, rule="spam@example.com")
    assert json.loads(mocked.calls[0].request.body) == {"Rule": "spam@example.com"}


def test_delete_inbound_trigger_rule_prints_status(mocked, client, capsys):
    mocked.add(
        responses.DELETE,
        f"{API_URL}/triggers/inboundrules/7",
        json={"ErrorCode": 0, "Message": "Rule removed."},
    )
    result = client.delete_inbound_trigger_rule(7)
    assert result == DeleteInboundTriggerResponse(error_code=0, message="Rule removed.")
    assert capsys.readouterr().out == f"[200] {API_URL}/triggers/inboundrules/7\n"


def test_custom_base_url(mocked):
    mocked.add(
        responses.DELETE,
        "http://localhost:9999/triggers/inboundrules/3",
        json={"ErrorCode": 812, "Message": "missing"},
    )
    client = PostmarkClient("token", base_url="http://localhost:9999")
    result = client.delete_inbound_trigger_rule(3)
    assert result.error_code == 812


def test_invalid_json_reply_raises(mocked, client):
    mocked.add(responses.GET, f"{API_URL}/templates", body="not json")
    with pytest.raises(PostmarkRequestError):
        client.list_templates(1, 0)


def test_mismatched_reply_types_raise(mocked, client):
    mocked.add(responses.GET, f"{API_URL}/templates", json={"TotalCount": "many"})
    with pytest.raises(PostmarkRequestError):
        client.list_templates(1, 0)


def test_connection_failure_raises(mocked, client):
    mocked.add(
        responses.POST,
        f"{API_URL}/triggers/inboundrules",
        body=requests.ConnectionError("refused"),
    )
    with pytest.raises(PostmarkRequestError, match="refused"):
        client.create_inbound_trigger_rule("spam@example.com")


def test_unencodable_body_raises_before_sending(mocked, client):
    email = NewEmailFromTemplate("cards@example.com", "friend@example.com", object())
    with pytest.raises(PostmarkRequestError, match="failed to encode"):
        client.send_with_template(email)
    assert len(mocked.calls) == 0