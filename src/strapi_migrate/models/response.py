"""HTTP response model with a parsed-or-raw body.

A response body is exactly one of two variants: the parsed JSON value, or
the raw text when the body is not valid JSON. Callers branch on ``kind``
rather than inspecting the value's type.
"""

import json
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class JsonBody(BaseModel):
    """Body that parsed as strict JSON."""

    kind: Literal["json"] = "json"
    value: Any


class TextBody(BaseModel):
    """Body that could not be parsed as JSON, kept verbatim."""

    kind: Literal["text"] = "text"
    value: str


ResponseBody = Annotated[JsonBody | TextBody, Field(discriminator="kind")]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_body(content: bytes, encoding: str | None = None) -> JsonBody | TextBody:
    """Parse a fully buffered body, falling back to raw text.

    Parsing is strict: ``NaN`` and ``Infinity`` literals are rejected the
    same way as any other malformed document. A charset Python does not
    know is treated as UTF-8.

    Args:
        content: Raw response bytes
        encoding: Charset declared by the response, if any

    Returns:
        JsonBody on a successful parse, TextBody otherwise
    """
    try:
        text = content.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        text = content.decode("utf-8", errors="replace")
    try:
        return JsonBody(value=json.loads(text, parse_constant=_reject_constant))
    except ValueError:
        return TextBody(value=text)


class ApiResponse(BaseModel):
    """Status code and body of one completed HTTP exchange.

    A non-2xx status is not an error at this level; it is returned for the
    caller to interpret.
    """

    status: int
    body: ResponseBody

    @classmethod
    def from_content(
        cls, status: int, content: bytes, encoding: str | None = None
    ) -> "ApiResponse":
        """Build a response from a status code and raw body bytes."""
        return cls(status=status, body=parse_body(content, encoding))

    @property
    def data(self) -> Any:
        """Parsed JSON value or raw text, whichever the body holds."""
        return self.body.value

    @property
    def is_json(self) -> bool:
        return self.body.kind == "json"
