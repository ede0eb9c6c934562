"""CLI: list tool definitions, or run one tool with JSON arguments and print the result."""
import asyncio
import json
import sys
import uuid

from gmaps_tools.config import load_config
from gmaps_tools.logging_utils import get_trace_id, set_trace_id
from gmaps_tools.tools import ToolRegistry

USAGE = "Usage: python main.py list  |  python main.py call <tool_name> ['{\"arg\": \"value\"}']"


def run_list(registry: ToolRegistry | None = None) -> int:
    """Print every tool definition (OpenAI function-calling format) as JSON."""
    registry = registry or ToolRegistry(load_config())
    print(json.dumps(registry.get_openai_tools(), indent=2))
    return 0


def _read_arguments(argv: list[str]) -> dict | None:
    """Arguments come from argv (after the tool name) or stdin. Returns None if not a JSON object."""
    if len(argv) > 3:
        raw = " ".join(argv[3:])
    elif sys.stdin is not None and not sys.stdin.isatty():
        raw = sys.stdin.read()
    else:
        raw = ""
    raw = raw.strip() or "{}"
    try:
        arguments = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"Arguments are not valid JSON: {e}", file=sys.stderr)
        return None
    if not isinstance(arguments, dict):
        print("Arguments must be a JSON object.", file=sys.stderr)
        return None
    return arguments


def run_call(argv: list[str], registry: ToolRegistry | None = None) -> int:
    """Entry for `call`: argv is [main.py, call, tool_name, ...json]. Prints the result JSON."""
    if len(argv) < 3:
        print(USAGE, file=sys.stderr)
        return 1
    tool_name = argv[2]
    arguments = _read_arguments(argv)
    if arguments is None:
        return 1

    if registry is None:
        registry = ToolRegistry(load_config())

    set_trace_id(str(uuid.uuid4()))
    result = asyncio.run(registry.run(tool_name, arguments))
    print(result.to_json())
    trace_id = get_trace_id()
    if trace_id:
        print(f"[trace_id={trace_id}]", file=sys.stderr)
    return 0 if result.ok else 1
