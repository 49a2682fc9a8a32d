"""
Envelope decoding.

Every JSON-returning Bot API method answers with the same wrapper:

    {"ok": true, "result": ...}
    {"ok": false, "error_code": 400, "description": "Bad Request: ..."}

This module parses that wrapper and, optionally, validates the result against
a pydantic model. It never performs I/O.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, TypeAdapter, ValidationError

from .base.errors import DecodeError, RemoteRejected

RawBody = Union[str, bytes]


class Envelope(BaseModel):
    """Uniform success/failure wrapper"""

    model_config = ConfigDict(extra="allow")

    ok: StrictBool
    result: Any = None
    error_code: Optional[int] = None
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None

    @property
    def has_result(self) -> bool:
        return "result" in self.model_fields_set

    def raise_for_status(self, method: Optional[str] = None) -> None:
        """Raise RemoteRejected for an ok=false envelope"""
        if not self.ok:
            raise RemoteRejected(
                error_code=self.error_code,
                description=self.description,
                parameters=self.parameters,
                method=method,
            )

    def unwrap(self, method: Optional[str] = None) -> Any:
        """Return result, or raise RemoteRejected"""
        self.raise_for_status(method)
        return self.result


def _preview(raw: RawBody) -> str:
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    return text[:200]


def decode(raw: RawBody) -> Envelope:
    """
    Parse a raw response body into an Envelope.

    Raises:
        DecodeError: body is not JSON, not an object, lacks `ok`, or breaks
            the ok/result pairing
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Invalid JSON response: {_preview(raw)!r}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"Response is not a JSON object: {_preview(raw)!r}")
    if "ok" not in data:
        raise DecodeError("Response envelope lacks the 'ok' field")

    try:
        envelope = Envelope.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Malformed response envelope: {e}") from e

    if envelope.ok and not envelope.has_result:
        raise DecodeError("Envelope has ok=true but no result")
    if not envelope.ok and envelope.has_result:
        raise DecodeError("Envelope has ok=false but carries a result")
    # description is allowed on success, setWebhook answers "Webhook was set"
    if envelope.ok and envelope.error_code is not None:
        raise DecodeError("Envelope has ok=true but carries an error_code")
    return envelope


def decode_result(
    raw: RawBody,
    model: Any = None,
    method: Optional[str] = None,
) -> Any:
    """
    Decode an envelope and return its result.

    Args:
        raw: Response body
        model: Expected result type (pydantic model or typing form such as
            List[Update]); None returns the result untouched
        method: API method name, used in error messages

    Raises:
        DecodeError: envelope or result shape is invalid
        RemoteRejected: envelope has ok=false
    """
    result = decode(raw).unwrap(method)
    if model is None:
        return result
    try:
        if isinstance(model, type) and issubclass(model, BaseModel):
            return model.model_validate(result)
        return TypeAdapter(model).validate_python(result)
    except ValidationError as e:
        name = method or "response"
        raise DecodeError(f"Unexpected result shape for {name}: {e}") from e


@dataclass(frozen=True)
class RawResponse:
    """
    Response of a fire-and-forget call.

    `body` is the raw text the platform returned; `envelope` is its decoded
    form, always with ok=true (ok=false raises before a RawResponse is built).
    """

    method: str
    body: str
    envelope: Envelope

    @classmethod
    def from_body(cls, method: str, body: str) -> "RawResponse":
        envelope = decode(body)
        envelope.raise_for_status(method)
        return cls(method=method, body=body, envelope=envelope)

    @property
    def ok(self) -> bool:
        return self.envelope.ok

    @property
    def result(self) -> Any:
        return self.envelope.result

    @property
    def message_id(self) -> Optional[int]:
        """message_id of the sent/edited message, when the result is a message"""
        if isinstance(self.result, dict):
            return self.result.get("message_id")
        return None

    def json(self) -> Dict[str, Any]:
        return json.loads(self.body)
