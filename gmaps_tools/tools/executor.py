"""Request executor: turn tool arguments into one HTTP GET and normalize the outcome.

Every tool goes through the same path: check required arguments, apply
defaults, encode the query string in declaration order with the API key last,
send one GET, and fold whatever happens into a ToolResult. Nothing raised
while building or sending the request escapes execute().
"""
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from gmaps_tools.config import API_KEY_ENV, MapsConfig
from gmaps_tools.logging_utils import get_logger
from gmaps_tools.tools.base import ToolDescriptor, ToolResult

logger = get_logger(__name__)

# Marker so that an explicit timeout=None (wait forever) differs from "use the config"
USE_CONFIG_TIMEOUT = object()


class MissingArgumentsError(ValueError):
    """Raised before any request is made when required arguments are absent."""

    def __init__(self, tool_name: str, missing: list[str]):
        self.tool_name = tool_name
        self.missing = missing
        super().__init__(f"Missing required parameter(s) for {tool_name}: {', '.join(missing)}")


@dataclass(frozen=True)
class PreparedRequest:
    url: str
    headers: dict[str, str]


def format_value(value: Any) -> str:
    """Render one argument the way the Maps query string expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, list, tuple, set, bytes)):
        raise TypeError(f"Cannot send a {type(value).__name__} value as a query parameter")
    return str(value)


def missing_required(descriptor: ToolDescriptor, arguments: Mapping[str, Any]) -> list[str]:
    return [name for name in descriptor.required if arguments.get(name) is None]


def query_pairs(descriptor: ToolDescriptor, arguments: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Resolve defaults and inclusion rules into ordered (wire_name, value) pairs (no key)."""
    pairs: list[tuple[str, str]] = []
    for param in descriptor.parameters:
        value = arguments.get(param.name)
        if param.required:
            pairs.append((param.wire_name, format_value(value)))
        elif param.default is not None:
            if value is None:
                value = param.default
            if param.send_when_falsy or value:
                pairs.append((param.wire_name, format_value(value)))
        elif value:
            pairs.append((param.wire_name, format_value(value)))
    return pairs


class RequestExecutor:
    """Sends tool requests with a fixed config. Holds no per-call state."""

    def __init__(
        self,
        config: MapsConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self._transport = transport

    def build_request(self, descriptor: ToolDescriptor, arguments: Mapping[str, Any]) -> PreparedRequest:
        missing = missing_required(descriptor, arguments)
        if missing:
            raise MissingArgumentsError(descriptor.name, missing)
        unknown = sorted(set(arguments) - {p.name for p in descriptor.parameters})
        if unknown:
            logger.debug("tool_arguments_ignored", tool_name=descriptor.name, ignored=unknown)
        pairs = query_pairs(descriptor, arguments)
        if self.config.api_key:
            pairs.append(("key", self.config.api_key))
        return PreparedRequest(
            url=str(httpx.URL(descriptor.url, params=pairs)),
            headers=descriptor.header_policy.headers(),
        )

    async def execute(
        self,
        descriptor: ToolDescriptor,
        arguments: Mapping[str, Any],
        *,
        timeout: Any = USE_CONFIG_TIMEOUT,
    ) -> ToolResult:
        """Make exactly one request for descriptor and return its result.

        timeout: seconds for this call; None disables it. Defaults to the config value.
        """
        try:
            request = self.build_request(descriptor, arguments)
        except Exception as e:
            logger.warning("tool_request_invalid", tool_name=descriptor.name, error=str(e))
            return ToolResult.from_exception(e)

        if not self.config.api_key:
            logger.warning("api_key_missing", tool_name=descriptor.name, env_var=API_KEY_ENV)

        if timeout is USE_CONFIG_TIMEOUT:
            timeout = self.config.timeout_seconds
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=timeout) as client:
                response = await client.get(request.url, headers=request.headers)
        except Exception as e:
            logger.warning(
                "tool_request_failed",
                tool_name=descriptor.name,
                error_type=type(e).__name__,
                error=str(e),
            )
            return ToolResult.from_exception(e)

        if not response.is_success:
            return self._upstream_error(descriptor, response)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(
                "tool_response_unreadable",
                tool_name=descriptor.name,
                status_code=response.status_code,
                error=str(e),
            )
            return ToolResult.from_exception(e, status_code=response.status_code)
        return ToolResult.success(data, status_code=response.status_code)

    def _upstream_error(self, descriptor: ToolDescriptor, response: httpx.Response) -> ToolResult:
        """Wrap a non-2xx response. JSON bodies are re-serialized compactly; anything else is passed as text."""
        try:
            body = response.json()
        except ValueError:
            message = response.text or f"HTTP {response.status_code} {response.reason_phrase}".strip()
        else:
            message = json.dumps(body, separators=(",", ":"), ensure_ascii=False)
        logger.warning(
            "tool_upstream_error",
            tool_name=descriptor.name,
            status_code=response.status_code,
        )
        return ToolResult.failure(message, status_code=response.status_code)
