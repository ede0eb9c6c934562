"""Central registry: register tool descriptors, get OpenAI tool list, execute by name."""
from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from gmaps_tools.config import MapsConfig, load_config
from gmaps_tools.logging_utils import get_logger, log_tool_call_end, log_tool_call_start
from gmaps_tools.tools.base import ToolDefinition, ToolDescriptor, ToolResult
from gmaps_tools.tools.executor import USE_CONFIG_TIMEOUT, RequestExecutor

logger = get_logger(__name__)

# Descriptors by name, filled in by the endpoint modules on import
_catalog: dict[str, ToolDescriptor] = {}


def register(descriptor: ToolDescriptor) -> ToolDescriptor:
    """Add a descriptor to the catalog. Names are dispatch keys, so duplicates are rejected."""
    if descriptor.name in _catalog:
        raise ValueError(f"Tool already registered: {descriptor.name}")
    _catalog[descriptor.name] = descriptor
    return descriptor


def registered_descriptors() -> list[ToolDescriptor]:
    return list(_catalog.values())


class ToolRegistry:
    """Binds descriptors to one executor built from an explicit config."""

    def __init__(
        self,
        config: MapsConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        descriptors: Iterable[ToolDescriptor] | None = None,
    ):
        self.executor = RequestExecutor(config or load_config(), transport=transport)
        if descriptors is None:
            self._descriptors = _catalog
        else:
            self._descriptors = {d.name: d for d in descriptors}

    def names(self) -> list[str]:
        return list(self._descriptors)

    def get(self, tool_name: str) -> ToolDescriptor | None:
        return self._descriptors.get(tool_name)

    def get_openai_tools(self) -> list[ToolDefinition]:
        return [d.to_openai_definition() for d in self._descriptors.values()]

    async def run(
        self,
        tool_name: str,
        arguments: Mapping[str, Any] | None = None,
        *,
        timeout: Any = USE_CONFIG_TIMEOUT,
    ) -> ToolResult:
        """Execute a tool by name and return the ToolResult (keeps the HTTP status)."""
        arguments = dict(arguments or {})
        descriptor = self._descriptors.get(tool_name)
        if descriptor is None:
            logger.warning("tool_unknown", tool_name=tool_name)
            return ToolResult.failure(f"Unknown tool: {tool_name}")
        log_tool_call_start(logger, tool_name=tool_name, arguments=arguments)
        result = await self.executor.execute(descriptor, arguments, timeout=timeout)
        log_tool_call_end(
            logger,
            tool_name=tool_name,
            success=result.ok,
            status_code=result.status_code,
            error=result.error,
        )
        return result

    async def execute(self, tool_name: str, arguments: Mapping[str, Any] | None = None) -> Any:
        """Execute a tool by name. Returns the upstream JSON, or {"error": message}."""
        result = await self.run(tool_name, arguments)
        return result.to_payload()


_default_registry: ToolRegistry | None = None


def get_tool_registry() -> ToolRegistry:
    """Return the process-wide registry, configured from the environment on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ToolRegistry(load_config())
    return _default_registry


def get_openai_tools() -> list[ToolDefinition]:
    return get_tool_registry().get_openai_tools()


async def execute(tool_name: str, arguments: Mapping[str, Any] | None = None) -> Any:
    return await get_tool_registry().execute(tool_name, arguments)
