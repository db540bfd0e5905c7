"""Unit tests for utility functions (playwright_scaffold.utils).

Tests cover:
- run_command (success, failure, cwd, timeout, capture=False)
- load_json / save_json
- ensure_dir / write_file / relative_to
- STEP_NAMES constants
- Rich output helpers
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from playwright_scaffold.utils import (
    STEP_NAMES,
    ensure_dir,
    load_json,
    print_error,
    print_hint,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
    relative_to,
    run_command,
    save_json,
    write_file,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    async def test_successful_command_list(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "print('hello')"]
        )
        assert returncode == 0
        assert stdout == "hello"

    @pytest.mark.unit
    async def test_failed_command(self):
        returncode, _, _ = await run_command(
            [sys.executable, "-c", "import sys; sys.exit(3)"]
        )
        assert returncode == 3

    @pytest.mark.unit
    async def test_command_with_cwd(self, tmp_path: Path):
        returncode, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert returncode == 0
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    async def test_no_capture_returns_empty_strings(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "pass"], capture=False
        )
        assert returncode == 0
        assert stdout == ""
        assert stderr == ""

    @pytest.mark.unit
    async def test_timeout(self):
        returncode, _, stderr = await run_command(
            [sys.executable, "-c", "import time; time.sleep(10)"], timeout=1
        )
        assert returncode == -1
        assert "timed out" in stderr

    @pytest.mark.unit
    async def test_missing_executable_raises(self):
        with pytest.raises(OSError):
            await run_command(["definitely-not-a-real-binary-xyz"])


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


class TestLoadJson:
    @pytest.mark.unit
    def test_loads_object(self, tmp_path: Path):
        f = tmp_path / "data.json"
        f.write_text('{"name": "demo"}', encoding="utf-8")
        assert load_json(f) == {"name": "demo"}

    @pytest.mark.unit
    def test_loads_object_with_bom(self, tmp_path: Path):
        f = tmp_path / "data.json"
        f.write_bytes(b"\xef\xbb\xbf" + b'{"name": "demo"}')
        assert load_json(f) == {"name": "demo"}

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path: Path):
        f = tmp_path / "bad.json"
        f.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(f)

    @pytest.mark.unit
    def test_non_object_rejected(self, tmp_path: Path):
        f = tmp_path / "list.json"
        f.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a JSON object"):
            load_json(f)


class TestSaveJson:
    @pytest.mark.unit
    async def test_two_space_indent_and_newline(self, tmp_path: Path):
        f = tmp_path / "out.json"
        await save_json({"a": {"b": 1}}, f)
        content = f.read_text(encoding="utf-8")
        assert content == '{\n  "a": {\n    "b": 1\n  }\n}\n'

    @pytest.mark.unit
    async def test_creates_parent_dirs(self, tmp_path: Path):
        f = tmp_path / "nested" / "dir" / "out.json"
        await save_json({"ok": True}, f)
        assert json.loads(f.read_text(encoding="utf-8")) == {"ok": True}

    @pytest.mark.unit
    async def test_keeps_unicode(self, tmp_path: Path):
        f = tmp_path / "out.json"
        await save_json({"name": "café"}, f)
        assert "café" in f.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


class TestFileHelpers:
    @pytest.mark.unit
    def test_ensure_dir_creates_nested(self, tmp_path: Path):
        result = ensure_dir(tmp_path / "a" / "b")
        assert result.is_dir()
        assert result == (tmp_path / "a" / "b").resolve()

    @pytest.mark.unit
    def test_ensure_dir_existing(self, tmp_path: Path):
        ensure_dir(tmp_path / "x")
        assert ensure_dir(tmp_path / "x").is_dir()

    @pytest.mark.unit
    def test_write_file_overwrites(self, tmp_path: Path):
        f = tmp_path / "deep" / "file.txt"
        write_file(f, "first")
        write_file(f, "second")
        assert f.read_text(encoding="utf-8") == "second"

    @pytest.mark.unit
    def test_relative_to_inside(self, tmp_path: Path):
        assert relative_to(tmp_path / "e2e" / "tests", tmp_path) == "e2e/tests"

    @pytest.mark.unit
    def test_relative_to_outside(self, tmp_path: Path):
        other = Path("/somewhere/else")
        assert relative_to(other, tmp_path) == str(other)


# ---------------------------------------------------------------------------
# Constants & Rich output
# ---------------------------------------------------------------------------


class TestStepNames:
    @pytest.mark.unit
    def test_six_steps_in_order(self):
        assert list(STEP_NAMES) == [1, 2, 3, 4, 5, 6]
        assert STEP_NAMES[1] == "CHECK"
        assert STEP_NAMES[3] == "INSTALL"
        assert STEP_NAMES[6] == "PATCH"


class TestRichOutput:
    @pytest.mark.unit
    def test_print_helpers(self):
        with patch("playwright_scaffold.utils.console") as mock_console:
            print_success("done")
            print_error("broken")
            print_warning("careful")
            print_hint("next")
        printed = [c.args[0] for c in mock_console.print.call_args_list]
        assert "[bold green]done[/bold green]" in printed
        assert "[bold red]broken[/bold red]" in printed
        assert "[bold yellow]careful[/bold yellow]" in printed
        assert "[cyan]next[/cyan]" in printed

    @pytest.mark.unit
    def test_print_step_header(self):
        with patch("playwright_scaffold.utils.console") as mock_console:
            print_step_header(3, "INSTALL")
        assert mock_console.print.call_count == 1

    @pytest.mark.unit
    def test_print_summary_table(self):
        with patch("playwright_scaffold.utils.console") as mock_console:
            print_summary_table({"API client": "yes"}, title="Run")
        table = mock_console.print.call_args_list[0].args[0]
        assert table.title == "Run"
        assert table.row_count == 1
