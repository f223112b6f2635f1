"""Client for the Postmark email API: templated sending, templates and inbound rules."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import requests

from postcart.postmark_errors import error_with_message
from postcart.postmark_models import EmailAttachment, EmailHeader

API_URL = "https://api.postmarkapp.com"
DEFAULT_TIMEOUT = 5.0

_TOKEN_HEADER = "X-Postmark-Server-Token"
_ACCEPTS_HEADER = "Accepts"
_CONTENT_TYPE_HEADER = "Content-Type"
_JSON = "application/json"

_EMAIL_WITH_TEMPLATE_PATH = "/email/withTemplate"
_TEMPLATES_PATH = "/templates"
_VALIDATE_TEMPLATE_PATH = "/templates/validate"
_INBOUND_RULES_PATH = "/triggers/inboundrules"


class PostmarkRequestError(Exception):
    """Raised when a request to the Postmark API cannot be made or its reply decoded."""


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


def _items(data: Mapping[str, Any], key: str, cls: Any) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected a list, got {type(value).__name__}")
    return [cls.from_dict(item) for item in value]


@dataclass
class NewEmailFromTemplate:
    """A message to send from a stored template."""

    from_address: str
    to: str
    template_model: Any = None
    template_id: int = 0
    template_alias: str = ""
    cc: str = ""
    bcc: str = ""
    tag: str = ""
    reply_to: str = ""
    headers: EmailHeader | None = None
    track_opens: bool = False
    attachments: list[EmailAttachment] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)
    message_stream: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"From": self.from_address, "To": self.to}
        if self.template_id:
            payload["TemplateId"] = self.template_id
        if self.template_alias:
            payload["TemplateAlias"] = self.template_alias
        payload["TemplateModel"] = self.template_model
        for key, value in (
            ("Cc", self.cc),
            ("Bcc", self.bcc),
            ("Tag", self.tag),
            ("ReplyTo", self.reply_to),
        ):
            if value:
                payload[key] = value
        if self.headers is not None:
            payload["Headers"] = self.headers.to_dict()
        if self.track_opens:
            payload["TrackOpens"] = True
        if self.attachments:
            payload["Attachments"] = [a.to_dict() for a in self.attachments]
        if self.metadata:
            payload["Metadata"] = dict(self.metadata)
        if self.message_stream:
            payload["MessageStream"] = self.message_stream
        return payload


@dataclass
class EmailResponse:
    """Postmark's reply to a send request."""

    to: str = ""
    submitted_at: str = ""
    message_id: str = ""
    error_code: int = 0
    message: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EmailResponse:
        data = _require_mapping(data, "email response")
        return cls(
            to=_str(data, "To"),
            submitted_at=_str(data, "SubmittedAt"),
            message_id=_str(data, "MessageID"),
            error_code=_int(data, "ErrorCode"),
            message=_str(data, "Message"),
        )


@dataclass
class TemplateInfo:
    """Summary of a stored template."""

    active: bool = False
    template_id: int = 0
    name: str = ""
    alias: str = ""
    template_type: str = ""
    layout_template: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> TemplateInfo:
        data = _require_mapping(data, "template info")
        return cls(
            active=_bool(data, "Active"),
            template_id=_int(data, "TemplateId"),
            name=_str(data, "Name"),
            alias=_str(data, "Alias"),
            template_type=_str(data, "TemplateType"),
            layout_template=_str(data, "LayoutTemplate"),
        )


@dataclass
class ListTemplatesResponse:
    """One page of stored templates."""

    total_count: int = 0
    templates: list[TemplateInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ListTemplatesResponse:
        data = _require_mapping(data, "template list")
        return cls(
            total_count=_int(data, "TotalCount"),
            templates=_items(data, "Templates", TemplateInfo),
        )


@dataclass
class NewTemplate:
    """A template to create."""

    name: str
    alias: str
    html_body: str = ""
    text_body: str = ""
    subject: str = ""
    template_type: str = ""
    layout_template: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "Name": self.name,
            "Alias": self.alias,
            "HtmlBody": self.html_body,
            "TextBody": self.text_body,
            "Subject": self.subject,
        }
        if self.template_type:
            payload["TemplateType"] = self.template_type
        if self.layout_template:
            payload["LayoutTemplate"] = self.layout_template
        return payload


@dataclass
class TemplateValidationRequest:
    """Template content to check, rendered against a test model."""

    subject: str = ""
    html_body: str = ""
    text_body: str = ""
    test_render_model: Any = None
    inline_css_for_html_test_render: bool = False
    template_type: str = ""
    layout_template: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "Subject": self.subject,
            "HtmlBody": self.html_body,
            "TextBody": self.text_body,
            "TestRenderModel": self.test_render_model,
        }
        if self.inline_css_for_html_test_render:
            payload["InlineCssForHtmlTestRender"] = True
        if self.template_type:
            payload["TemplateType"] = self.template_type
        payload["LayoutTemplate"] = self.layout_template
        return payload


@dataclass
class TemplateValidationError:
    """A problem found in one part of a template."""

    message: str = ""
    line: int = 0
    character_position: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> TemplateValidationError:
        data = _require_mapping(data, "validation error")
        return cls(
            message=_str(data, "Message"),
            line=_int(data, "Line"),
            character_position=_int(data, "CharacterPosition"),
        )


@dataclass
class TemplateTargetValidationResult:
    """Validation outcome for the subject, HTML body or text body."""

    content_is_valid: bool = False
    validation_errors: list[TemplateValidationError] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> TemplateTargetValidationResult:
        data = _require_mapping(data, "validation result")
        return cls(
            content_is_valid=_bool(data, "ContentIsValid"),
            validation_errors=_items(data, "ValidationErrors", TemplateValidationError),
        )


def _target_result(data: Mapping[str, Any], key: str) -> TemplateTargetValidationResult:
    value = data.get(key)
    if value is None:
        return TemplateTargetValidationResult()
    return TemplateTargetValidationResult.from_dict(value)


@dataclass
class TemplateValidationResponse:
    """Postmark's verdict on a template validation request."""

    all_content_is_valid: bool = False
    text_body: TemplateTargetValidationResult = field(
        default_factory=TemplateTargetValidationResult
    )
    html_body: TemplateTargetValidationResult = field(
        default_factory=TemplateTargetValidationResult
    )
    subject: TemplateTargetValidationResult = field(
        default_factory=TemplateTargetValidationResult
    )
    suggested_template_model: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> TemplateValidationResponse:
        data = _require_mapping(data, "validation response")
        suggested = data.get("SuggestedTemplateModel")
        if suggested is not None:
            suggested = dict(_require_mapping(suggested, "SuggestedTemplateModel"))
        return cls(
            all_content_is_valid=_bool(data, "AllContentIsValid"),
            text_body=_target_result(data, "TextBody"),
            html_body=_target_result(data, "HtmlBody"),
            subject=_target_result(data, "Subject"),
            suggested_template_model=suggested,
        )


@dataclass
class InboundTriggerRuleResponse:
    """A created inbound blocking rule."""

    id: int = 0
    rule: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> InboundTriggerRuleResponse:
        data = _require_mapping(data, "inbound rule")
        return cls(id=_int(data, "ID"), rule=_str(data, "Rule"))


@dataclass
class DeleteInboundTriggerResponse:
    """Postmark's reply to deleting an inbound rule."""

    error_code: int = 0
    message: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> DeleteInboundTriggerResponse:
        data = _require_mapping(data, "delete response")
        return cls(error_code=_int(data, "ErrorCode"), message=_str(data, "Message"))


class PostmarkClient:
    """Makes authenticated JSON requests to the Postmark API."""

    def __init__(
        self,
        server_token: str,
        base_url: str = API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.default_headers = {_TOKEN_HEADER: server_token, _ACCEPTS_HEADER: _JSON}

    def request(self, path: str, method: str, body: Any = None) -> Any:
        """Send a request and return the decoded JSON reply."""
        url = f"{self.base_url}{path}"
        headers = dict(self.default_headers)
        data = None
        if body is not None:
            try:
                data = json.dumps(body).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise PostmarkRequestError(
                    f"failed to encode struct to body: {exc}"
                ) from exc
            headers[_CONTENT_TYPE_HEADER] = _JSON

        try:
            response = self.session.request(
                method, url, headers=headers, data=data, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise PostmarkRequestError(
                f"postmark request err: api client response err: {exc}"
            ) from exc

        print(f"[{response.status_code}] {url}")
        try:
            return response.json()
        except ValueError as exc:
            raise PostmarkRequestError(
                f"postmark request err: api client failed to decode response err: {exc}"
            ) from exc

    def _call(self, path: str, method: str, body: Any, model: Any) -> Any:
        payload = self.request(path, method, body)
        try:
            return model.from_dict(payload)
        except ValueError as exc:
            raise PostmarkRequestError(
                f"postmark request err: api client failed to decode response err: {exc}"
            ) from exc

    def send_with_template(self, email: NewEmailFromTemplate) -> EmailResponse:
        """Send a templated message; raise PostmarkError if Postmark rejects it."""
        result = self._call(
            _EMAIL_WITH_TEMPLATE_PATH, "POST", email.to_dict(), EmailResponse
        )
        if result.error_code > 0:
            raise error_with_message(result.error_code, result.message)
        return result

    def list_templates(self, count: int, offset: int) -> ListTemplatesResponse:
        path = f"{_TEMPLATES_PATH}?count={count}&offset={offset}"
        return self._call(path, "GET", None, ListTemplatesResponse)

    def create_template(self, template: NewTemplate) -> TemplateInfo:
        return self._call(_TEMPLATES_PATH, "POST", template.to_dict(), TemplateInfo)

    def validate_template(
        self, request: TemplateValidationRequest
    ) -> TemplateValidationResponse:
        return self._call(
            _VALIDATE_TEMPLATE_PATH, "POST", request.to_dict(), TemplateValidationResponse
        )

    def create_inbound_trigger_rule(self, email_or_domain: str) -> InboundTriggerRuleResponse:
        """Block inbound mail from an address or domain."""
        return self._call(
            _INBOUND_RULES_PATH, "POST", {"Rule": email_or_domain}, InboundTriggerRuleResponse
        )

    def delete_inbound_trigger_rule(self, rule_id: int) -> DeleteInboundTriggerResponse:
        return self._call(
            f"{_INBOUND_RULES_PATH}/{rule_id}", "DELETE", None, DeleteInboundTriggerResponse
        )