"""Tests for the goat renderer — subprocess stubbed unless noted."""

import shlex
import subprocess
import sys

import pytest

from sitetags import render_goat
from sitetags.config import DEFAULT_GOAT_COMMAND, SitetagsConfig
from sitetags.errors import CommandNotFoundError, RenderingFailedError, SitetagsConfigError
from sitetags.renderers.base import RenderResult
from sitetags.renderers.goat import GoatRenderer, run_command

STUB_SVG = "<svg xmlns='http://www.w3.org/2000/svg' version='1.1' height='10' width='20'><text>A---B</text></svg>"
EXPECTED = (
    '<div class="goat-svg">'
    "<svg xmlns='http://www.w3.org/2000/svg' version='1.1' width='100%' viewBox='0 0 10 20' "
    "preserveAspectRatio='xMidYMid'><text>A---B</text></svg>"
    "</div>"
)


def fake_run(stdout="", stderr="", returncode=0):
    calls = []

    def run(argv, **kwargs):
        calls.append((argv, kwargs))
        return subprocess.CompletedProcess(argv, returncode, stdout=stdout, stderr=stderr)

    run.calls = calls
    return run


def missing_binary(argv, **kwargs):
    raise FileNotFoundError(2, "No such file or directory", argv[0])


class TestGoatRenderer:
    def test_end_to_end_with_stub(self, monkeypatch):
        run = fake_run(stdout=STUB_SVG)
        monkeypatch.setattr(subprocess, "run", run)
        result = GoatRenderer().render("A---B")
        assert result.ok
        assert result.unwrap() == EXPECTED

    def test_invokes_goat_with_current_color(self, monkeypatch):
        run = fake_run(stdout=STUB_SVG)
        monkeypatch.setattr(subprocess, "run", run)
        GoatRenderer().render("A---B")
        argv, kwargs = run.calls[0]
        assert argv == ["goat", "-sls", "currentColor", "-sds", "currentColor"]
        assert kwargs["capture_output"] is True
        assert "timeout" not in kwargs

    def test_stdin_is_normalised(self, monkeypatch):
        run = fake_run(stdout=STUB_SVG)
        monkeypatch.setattr(subprocess, "run", run)
        GoatRenderer().render("\nA---B\n")
        assert run.calls[0][1]["input"] == "A---B"

    @pytest.mark.parametrize("text", ["A---B", "", "\n+--+\n"])
    def test_missing_command(self, monkeypatch, text):
        monkeypatch.setattr(subprocess, "run", missing_binary)
        result = GoatRenderer().render(text)
        assert not result.ok
        assert result.kind == "CommandNotFoundError"
        assert isinstance(result.error, CommandNotFoundError)
        assert result.error.command == "goat"
        with pytest.raises(CommandNotFoundError):
            result.unwrap()

    def test_nonzero_exit_uses_stderr(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", fake_run(stdout="partial", stderr="bad diagram", returncode=1))
        result = GoatRenderer().render("A---B")
        assert isinstance(result.error, RenderingFailedError)
        assert result.message == f"{DEFAULT_GOAT_COMMAND}: bad diagram"

    def test_nonzero_exit_falls_back_to_stdout(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", fake_run(stdout="usage: goat", returncode=2))
        result = GoatRenderer().render("A---B")
        assert result.kind == "RenderingFailedError"
        assert result.message == f"{DEFAULT_GOAT_COMMAND}: usage: goat"

    def test_unrecognised_svg_only_wrapped(self, monkeypatch):
        svg = "<svg viewBox='0 0 1 1'></svg>"
        monkeypatch.setattr(subprocess, "run", fake_run(stdout=svg))
        assert GoatRenderer().render("x").unwrap() == f'<div class="goat-svg">{svg}</div>'

    def test_custom_config(self, monkeypatch):
        run = fake_run(stdout=STUB_SVG)
        monkeypatch.setattr(subprocess, "run", run)
        config = SitetagsConfig(goat_command="/opt/bin/goat -sls red", wrapper_class="diagram", swap_viewbox_axes=False)
        out = GoatRenderer(config).render("A---B").unwrap()
        assert run.calls[0][0] == ["/opt/bin/goat", "-sls", "red"]
        assert out.startswith('<div class="diagram">')
        assert "viewBox='0 0 20 10'" in out

    def test_unstartable_command(self, monkeypatch):
        def run(argv, **kwargs):
            raise PermissionError(13, "Permission denied", argv[0])

        monkeypatch.setattr(subprocess, "run", run)
        result = GoatRenderer().render("A---B")
        assert result.kind == "CommandNotFoundError"
        assert result.error.command == "goat"
        assert result.message == "cannot run goat: Permission denied"

    def test_undecodable_output(self, monkeypatch):
        def run(argv, **kwargs):
            raise UnicodeDecodeError("utf-8", b"\xff\xfe", 0, 1, "invalid start byte")

        monkeypatch.setattr(subprocess, "run", run)
        result = GoatRenderer().render("A---B")
        assert result.kind == "RenderingFailedError"
        assert result.message.startswith(f"{DEFAULT_GOAT_COMMAND}: output is not valid UTF-8")

    def test_command_emptied_after_construction(self):
        config = SitetagsConfig()
        config.goat_command = "  "
        result = GoatRenderer(config).render("A---B")
        assert result.kind == "SitetagsConfigError"

    def test_render_goat_raises(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", missing_binary)
        with pytest.raises(CommandNotFoundError, match="goat"):
            render_goat("A---B", SitetagsConfig())


class TestRunCommand:
    """These run a real Python subprocess standing in for goat."""

    def test_missing_executable(self):
        with pytest.raises(CommandNotFoundError) as excinfo:
            run_command("sitetags-no-such-binary --flag", "x")
        assert excinfo.value.command == "sitetags-no-such-binary"

    def test_echoes_stdin(self):
        script = "import sys; sys.stdout.write(sys.stdin.read().upper())"
        command = f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"
        assert run_command(command, "a---b") == "A---B"

    def test_failure_message_includes_command_and_stderr(self):
        script = "import sys; sys.stderr.write('boom'); sys.exit(3)"
        command = f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"
        with pytest.raises(RenderingFailedError) as excinfo:
            run_command(command, "")
        assert str(excinfo.value) == f"{command}: boom"

    def test_non_executable_file(self, tmp_path):
        script = tmp_path / "goat"
        script.write_text("#!/bin/sh\necho hi\n")
        script.chmod(0o644)
        with pytest.raises(CommandNotFoundError) as excinfo:
            run_command(str(script), "x")
        assert excinfo.value.command == str(script)

    def test_invalid_utf8_output(self):
        script = "import sys; sys.stdout.buffer.write(bytes([255, 254]))"
        command = f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"
        with pytest.raises(RenderingFailedError, match="not valid UTF-8"):
            run_command(command, "")

    def test_empty_command(self):
        with pytest.raises(SitetagsConfigError):
            run_command("", "x")


class TestSitetagsConfig:
    @pytest.mark.parametrize("command", ["", "   "])
    def test_rejects_empty_goat_command(self, command):
        with pytest.raises(SitetagsConfigError):
            SitetagsConfig(goat_command=command)


class TestRenderResult:
    def test_empty_success_unwraps(self):
        assert RenderResult.success("").unwrap() == ""

    def test_failure_has_no_markup(self):
        result = RenderResult.failure(RenderingFailedError("boom"))
        assert result.markup == ""
        with pytest.raises(RenderingFailedError, match="boom"):
            result.unwrap()
