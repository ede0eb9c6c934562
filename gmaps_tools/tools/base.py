"""Tool protocol: name, description, JSON schema for parameters, and the result shape."""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

# OpenAI tool definition shape: we use "function" type with name, description, parameters (JSON Schema)
ToolDefinition = dict[str, Any]  # {"type": "function", "function": {"name", "description", "parameters"}}

ParameterType = Literal["string", "number", "integer", "boolean"]


class HeaderPolicy(str, Enum):
    """Which JSON header an endpoint family sends with its GET."""

    ACCEPT_JSON = "accept"
    CONTENT_TYPE_JSON = "content-type"

    def headers(self) -> dict[str, str]:
        if self is HeaderPolicy.CONTENT_TYPE_JSON:
            return {"Content-Type": "application/json"}
        return {"Accept": "application/json"}


@dataclass(frozen=True)
class Parameter:
    """One query parameter of a tool.

    required: always sent; the call is rejected locally when it is missing.
    default: applied when the argument is absent or None, then sent unless None.
    Neither: sent only when the caller passes a truthy value.
    send_when_falsy: False for defaulted parameters that are dropped when the
        resolved value is falsy (e.g. language="" on autocomplete).
    query_name: the wire name when it differs from the argument name.
    """

    name: str
    type: ParameterType
    description: str
    required: bool = False
    default: Any = None
    enum: tuple[str, ...] | None = None
    query_name: str | None = None
    send_when_falsy: bool = True

    @property
    def wire_name(self) -> str:
        return self.query_name or self.name

    def to_json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type}
        if self.enum:
            schema["enum"] = list(self.enum)
        schema["description"] = self.description
        return schema


@dataclass(frozen=True)
class ToolDescriptor:
    """Static description of one endpoint: what the caller sees and what the executor sends."""

    name: str
    description: str
    url: str
    parameters: tuple[Parameter, ...]
    header_policy: HeaderPolicy = HeaderPolicy.ACCEPT_JSON

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def to_json_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.to_json_schema() for p in self.parameters},
            "required": self.required,
        }

    def to_openai_definition(self) -> ToolDefinition:
        return make_definition(self.name, self.description, self.to_json_schema())


def make_definition(
    name: str,
    description: str,
    parameters: dict[str, Any],
) -> ToolDefinition:
    """Build an OpenAI tool definition.
    parameters: JSON Schema for the function (e.g. {"type": "object", "properties": {...}, "required": [...]}).
    """
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": description,
            "parameters": parameters,
        },
    }


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool invocation: the upstream JSON, or an error message.

    status_code is the HTTP status when a response was received, so in-process
    callers can tell a 4xx from a 5xx without parsing the message.
    """

    data: Any = None
    error: str | None = None
    status_code: int | None = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any, status_code: int | None = None) -> "ToolResult":
        return cls(data=data, status_code=status_code)

    @classmethod
    def failure(cls, message: str, status_code: int | None = None) -> "ToolResult":
        return cls(error=message, status_code=status_code)

    @classmethod
    def from_exception(cls, exc: BaseException, status_code: int | None = None) -> "ToolResult":
        return cls.failure(str(exc) or repr(exc), status_code=status_code)

    def to_payload(self) -> Any:
        """External shape: upstream JSON on success, {"error": message} on failure."""
        if self.ok:
            return self.data
        return {"error": self.error}

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_payload(), indent=indent, ensure_ascii=False)
