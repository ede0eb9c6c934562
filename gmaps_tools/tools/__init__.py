"""Tools available to callers. Each endpoint is a descriptor run through one shared executor."""
from gmaps_tools.tools.base import HeaderPolicy, Parameter, ToolDescriptor, ToolResult
from gmaps_tools.tools.executor import MissingArgumentsError, PreparedRequest, RequestExecutor
from gmaps_tools.tools.registry import (
    ToolRegistry,
    execute,
    get_openai_tools,
    get_tool_registry,
    register,
    registered_descriptors,
)

# Import endpoint modules so they register themselves
import gmaps_tools.tools.places  # noqa: F401,E402
import gmaps_tools.tools.routes  # noqa: F401,E402
import gmaps_tools.tools.weather  # noqa: F401,E402

__all__ = [
    "HeaderPolicy",
    "MissingArgumentsError",
    "Parameter",
    "PreparedRequest",
    "RequestExecutor",
    "ToolDescriptor",
    "ToolRegistry",
    "ToolResult",
    "execute",
    "get_openai_tools",
    "get_tool_registry",
    "register",
    "registered_descriptors",
]
