"""Tests for system prompt resolution."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from devtask.agent.resolver import (
    MEMORY_SEPARATOR,
    PromptResolver,
    get_core_system_prompt,
    memory_suffix,
)
from devtask.config.errors import ConfigError, MissingSystemPromptError
from devtask.config.schema import PromptConfig
from devtask.prompts.system import render_system_prompt

DEFAULT_PROMPT = render_system_prompt()


def _resolver(tmp_path, **settings) -> PromptResolver:
    return PromptResolver(PromptConfig(**settings), cwd=tmp_path)


def _default_file(tmp_path) -> Path:
    return Path(os.path.abspath(tmp_path / ".devtask" / "system.md"))


class TestBuiltinPrompt:
    @pytest.mark.parametrize("value", [None, "0", "false", "FALSE", "False", "", "   "])
    def test_disabled_returns_default(self, tmp_path, value):
        assert _resolver(tmp_path, system_md=value).resolve() == DEFAULT_PROMPT

    def test_disabled_does_not_read_files(self, tmp_path):
        with patch.object(Path, "read_text", side_effect=AssertionError("unexpected read")):
            assert _resolver(tmp_path, system_md="false").resolve() == DEFAULT_PROMPT

    def test_default_is_trimmed(self, tmp_path):
        result = _resolver(tmp_path).resolve()
        assert result == result.strip()
        assert result.startswith("You are an interactive CLI agent")

    def test_disabled_ignores_existing_default_file(self, tmp_path):
        default = _default_file(tmp_path)
        default.parent.mkdir(parents=True)
        default.write_text("custom")
        assert _resolver(tmp_path, system_md="0").resolve() == DEFAULT_PROMPT


class TestOverride:
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "True"])
    def test_enabled_default_path_missing(self, tmp_path, value):
        with pytest.raises(MissingSystemPromptError) as exc_info:
            _resolver(tmp_path, system_md=value).resolve()
        assert exc_info.value.path == _default_file(tmp_path)
        assert str(_default_file(tmp_path)) in str(exc_info.value)

    def test_missing_file_is_config_error(self, tmp_path):
        with pytest.raises(ConfigError, match="missing system prompt file"):
            _resolver(tmp_path, system_md="nope.md").resolve()

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "True"])
    def test_enabled_default_path_present(self, tmp_path, value):
        default = _default_file(tmp_path)
        default.parent.mkdir(parents=True)
        default.write_text("from default location\n", encoding="utf-8")
        assert _resolver(tmp_path, system_md=value).resolve() == "from default location\n"

    def test_custom_path_passthrough(self, tmp_path):
        content = "  X with padding and ünïcode\n\n"
        (tmp_path / "my_prompt.md").write_text(content, encoding="utf-8")
        assert _resolver(tmp_path, system_md="my_prompt.md").resolve() == content

    def test_custom_path_keeps_case(self, tmp_path):
        (tmp_path / "Prompts").mkdir()
        (tmp_path / "Prompts" / "System.MD").write_text("cased")
        resolver = _resolver(tmp_path, system_md="Prompts/System.MD")
        assert resolver.override_path().name == "System.MD"
        assert resolver.resolve() == "cased"

    def test_custom_path_resolves_against_cwd(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        (tmp_path / "shared.md").write_text("shared")
        resolver = _resolver(project, system_md="../shared.md")
        assert resolver.override_path() == Path(os.path.abspath(tmp_path / "shared.md"))
        assert resolver.resolve() == "shared"

    def test_missing_default_path_keeps_symlinked_cwd(self, tmp_path):
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real, target_is_directory=True)
        with pytest.raises(MissingSystemPromptError) as exc_info:
            _resolver(link, system_md="1").resolve()
        assert exc_info.value.path == Path(os.path.abspath(link / ".devtask" / "system.md"))
        assert str(link) in str(exc_info.value)

    def test_missing_custom_path_names_absolute_path(self, tmp_path):
        with pytest.raises(MissingSystemPromptError) as exc_info:
            _resolver(tmp_path, system_md="Missing.md").resolve()
        assert exc_info.value.path == Path(os.path.abspath(tmp_path / "Missing.md"))

    def test_unreadable_override_propagates(self, tmp_path):
        (tmp_path / "dir.md").mkdir()
        with pytest.raises(OSError):
            _resolver(tmp_path, system_md="dir.md").resolve()


class TestWriteBack:
    def test_write_default_prompt_to_custom_path(self, tmp_path):
        result = _resolver(tmp_path, write_system_md="captured.md").resolve()
        assert result == DEFAULT_PROMPT
        assert (tmp_path / "captured.md").read_text(encoding="utf-8") == DEFAULT_PROMPT

    @pytest.mark.parametrize("value", ["1", "true", "True"])
    def test_write_default_prompt_to_default_path(self, tmp_path, value):
        (tmp_path / ".devtask").mkdir()
        _resolver(tmp_path, write_system_md=value).resolve()
        assert _default_file(tmp_path).read_text(encoding="utf-8") == DEFAULT_PROMPT

    @pytest.mark.parametrize("value", [None, "0", "false", "FALSE", " "])
    def test_write_disabled(self, tmp_path, value):
        resolver = _resolver(tmp_path, write_system_md=value)
        resolver.resolve()
        assert resolver.write_path() is None
        assert not _default_file(tmp_path).exists()

    def test_write_excludes_memory(self, tmp_path):
        result = _resolver(tmp_path, write_system_md="out.md").resolve("remember this")
        assert (tmp_path / "out.md").read_text(encoding="utf-8") == DEFAULT_PROMPT
        assert result.endswith("remember this")

    def test_write_copies_override_contents(self, tmp_path):
        (tmp_path / "in.md").write_text("override body")
        _resolver(tmp_path, system_md="in.md", write_system_md="out.md").resolve()
        assert (tmp_path / "out.md").read_text() == "override body"

    def test_write_overwrites_existing(self, tmp_path):
        (tmp_path / "out.md").write_text("stale")
        _resolver(tmp_path, write_system_md="out.md").resolve()
        assert (tmp_path / "out.md").read_text(encoding="utf-8") == DEFAULT_PROMPT

    def test_no_write_when_override_missing(self, tmp_path):
        with pytest.raises(MissingSystemPromptError):
            _resolver(tmp_path, system_md="missing.md", write_system_md="out.md").resolve()
        assert not (tmp_path / "out.md").exists()

    def test_write_failure_propagates(self, tmp_path):
        (tmp_path / "out.md").mkdir()
        with pytest.raises(OSError):
            _resolver(tmp_path, write_system_md="out.md").resolve()

    def test_missing_parent_directory_propagates(self, tmp_path):
        with pytest.raises(OSError):
            _resolver(tmp_path, write_system_md="nodir/out.md").resolve()
        assert not (tmp_path / "nodir").exists()

    def test_default_write_needs_config_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            _resolver(tmp_path, write_system_md="true").resolve()
        assert not (tmp_path / ".devtask").exists()

    def test_maybe_persist_returns_written_path(self, tmp_path):
        resolver = _resolver(tmp_path, write_system_md="Out.md")
        assert resolver.maybe_persist("text") == Path(os.path.abspath(tmp_path / "Out.md"))

    def test_maybe_persist_disabled(self, tmp_path):
        assert _resolver(tmp_path).maybe_persist("text") is None


class TestMemory:
    def test_memory_appended(self, tmp_path):
        result = _resolver(tmp_path).resolve("M")
        assert result == DEFAULT_PROMPT + "\n\n---\n\n" + "M"

    def test_memory_trimmed(self, tmp_path):
        result = _resolver(tmp_path).resolve("\n  user prefers tabs  \n")
        assert result == DEFAULT_PROMPT + MEMORY_SEPARATOR + "user prefers tabs"

    @pytest.mark.parametrize("memory", [None, "", "   ", "\n\t"])
    def test_blank_memory_adds_nothing(self, tmp_path, memory):
        assert _resolver(tmp_path).resolve(memory) == DEFAULT_PROMPT

    def test_memory_after_override(self, tmp_path):
        (tmp_path / "p.md").write_text("base\n")
        assert _resolver(tmp_path, system_md="p.md").resolve("mem") == "base\n\n\n---\n\nmem"

    def test_memory_suffix(self):
        assert memory_suffix(" a ") == "\n\n---\n\na"
        assert memory_suffix("  ") == ""


class TestCustomToolNames:
    def test_tool_names_interpolated(self, tmp_path):
        result = _resolver(tmp_path, tools={"shell": "bash", "read_file": "cat_file"}).resolve()
        assert "[tool_call: bash command" in result
        assert "'cat_file'" in result
        assert "run_shell_command" not in result


class TestGetCoreSystemPrompt:
    def test_reads_environment(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "env_prompt.md").write_text("from env")
        monkeypatch.setenv("DEVTASK_SYSTEM_MD", "env_prompt.md")
        assert get_core_system_prompt("mem") == "from env\n\n---\n\nmem"

    def test_explicit_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DEVTASK_SYSTEM_MD", "true")
        assert get_core_system_prompt(config=PromptConfig(system_md="0")) == DEFAULT_PROMPT

    def test_each_call_rereads_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DEVTASK_SYSTEM_MD", "p.md")
        (tmp_path / "p.md").write_text("one")
        assert get_core_system_prompt() == "one"
        (tmp_path / "p.md").write_text("two")
        assert get_core_system_prompt() == "two"
