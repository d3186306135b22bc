"""Unit tests for dashboard file helpers."""

import json
from pathlib import Path

import pytest

from grafana_tools.files import read_json_file, resolve_dashboard_path, write_json_file


class TestJsonFiles:
    """Tests for async JSON read/write."""

    @pytest.mark.asyncio
    async def test_write_uses_two_space_indent(self, tmp_path: Path) -> None:
        path = tmp_path / "out.json"

        await write_json_file(path, {"dashboard": {"id": 1}})

        assert path.read_text(encoding="utf-8") == '{\n  "dashboard": {\n    "id": 1\n  }\n}'

    @pytest.mark.asyncio
    async def test_write_keeps_non_ascii_characters(self, tmp_path: Path) -> None:
        path = tmp_path / "out.json"

        await write_json_file(path, {"dashboard": {"title": "Café ☕"}})

        text = path.read_text(encoding="utf-8")
        assert '"title": "Café ☕"' in text
        assert "\\u" not in text

    @pytest.mark.asyncio
    async def test_read_parses_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "in.json"
        path.write_text(json.dumps({"dashboard": {"title": "Café ☕"}}, ensure_ascii=False), encoding="utf-8")

        assert await read_json_file(path) == {"dashboard": {"title": "Café ☕"}}

    @pytest.mark.asyncio
    async def test_read_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await read_json_file(tmp_path / "missing.json")


class TestResolveDashboardPath:
    """Tests for command line file argument resolution."""

    def test_relative_path_resolved_against_cwd(self, tmp_path: Path) -> None:
        assert resolve_dashboard_path("dash.json", cwd=tmp_path) == tmp_path / "dash.json"

    def test_defaults_to_current_directory(self, tmp_path: Path) -> None:
        # the root conftest runs every test inside tmp_path
        assert resolve_dashboard_path("dash.json") == Path.cwd() / "dash.json"

    def test_absolute_path_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "abs" / "dash.json"
        assert resolve_dashboard_path(str(target), cwd=Path("/elsewhere")) == target

    def test_json_extension_appended(self, tmp_path: Path) -> None:
        assert resolve_dashboard_path("dashboards/home", cwd=tmp_path) == tmp_path / "dashboards" / "home.json"

    def test_js_extension_kept(self, tmp_path: Path) -> None:
        assert resolve_dashboard_path("home.js", cwd=tmp_path) == tmp_path / "home.js"

    def test_other_extension_gets_json_appended(self, tmp_path: Path) -> None:
        assert resolve_dashboard_path("home.v2", cwd=tmp_path) == tmp_path / "home.v2.json"
