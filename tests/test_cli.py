"""Tests for the list/call command line entry points."""
import io
import json

import httpx
import pytest

from gmaps_tools import cli
from gmaps_tools.config import MapsConfig
from gmaps_tools.tools import ToolRegistry
from gmaps_tools.tools import executor as executor_module


class TestCli:
    def test_list_prints_definitions(self, registry, capsys):
        assert cli.run_list(registry) == 0
        tools = json.loads(capsys.readouterr().out)
        assert len(tools) == 14
        assert tools[0]["type"] == "function"

    def test_call_success(self, registry, upstream, capsys):
        upstream.reply(200, {"snappedPoints": []})
        code = cli.run_call(["main.py", "call", "nearest_roads", '{"points": "1,2"}'], registry)
        out = capsys.readouterr()
        assert code == 0
        assert json.loads(out.out) == {"snappedPoints": []}
        assert "trace_id=" in out.err

    def test_call_error_result_exits_nonzero(self, registry, upstream, capsys):
        upstream.reply(400, {"error_message": "invalid request"})
        code = cli.run_call(["main.py", "call", "nearest_roads", '{"points": "1,2"}'], registry)
        assert code == 1
        assert json.loads(capsys.readouterr().out) == {"error": '{"error_message":"invalid request"}'}

    def test_call_reads_arguments_from_stdin(self, registry, upstream, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"path": "1,2|3,4", "interpolate": true}'))
        assert cli.run_call(["main.py", "call", "snap_to_roads"], registry) == 0
        params = upstream.requests[0].url.params
        assert params["path"] == "1,2|3,4"
        assert params["interpolate"] == "true"

    @pytest.mark.parametrize("raw", ["{not json", "[1, 2]"])
    def test_call_rejects_bad_arguments(self, registry, upstream, raw, capsys):
        assert cli.run_call(["main.py", "call", "nearest_roads", raw], registry) == 1
        assert upstream.requests == []

    def test_call_without_tool_name(self, registry, capsys):
        assert cli.run_call(["main.py", "call"], registry) == 1
        assert "Usage" in capsys.readouterr().err

    def test_missing_key_warned_once_per_call(self, upstream, monkeypatch, capsys):
        warnings = []

        class RecordingLogger:
            def warning(self, event, **kw):
                warnings.append(event)

            def debug(self, event, **kw):
                pass

        monkeypatch.setattr(executor_module, "logger", RecordingLogger())
        monkeypatch.setattr(cli, "load_config", lambda: MapsConfig(api_key=None))
        monkeypatch.setattr(
            cli, "ToolRegistry", lambda config: ToolRegistry(config, transport=httpx.MockTransport(upstream))
        )
        upstream.reply(200, {"snappedPoints": []})
        assert cli.run_call(["main.py", "call", "nearest_roads", '{"points": "1,2"}']) == 0
        assert warnings.count("api_key_missing") == 1
        assert "key" not in upstream.requests[0].url.params
