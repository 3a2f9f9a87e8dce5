"""Tests for the command line interface."""
import json

import pytest
from typer.testing import CliRunner

from aichat.chat import ChatController
from aichat.cli.app import app
from aichat.settings import InMemorySettingsStore

runner = CliRunner()


@pytest.fixture
def settings_file(tmp_path):
    return tmp_path / "settings.json"


def _invoke(settings_file, *args):
    return runner.invoke(app, [*args, "--settings-path", str(settings_file)])


class TestProvidersCommand:
    """Tests for `aichat providers`."""

    def test_lists_openai_models(self):
        result = runner.invoke(app, ["providers"])
        assert result.exit_code == 0
        assert "OpenAI" in result.output
        assert "gpt-3.5-turbo" in result.output
        assert "default" in result.output
        assert "gpt-4-turbo" in result.output


class TestSettingsCommands:
    """Tests for `aichat settings show` and `aichat settings set`."""

    def test_show_defaults(self, settings_file):
        result = _invoke(settings_file, "settings", "show")
        assert result.exit_code == 0
        assert "openai" in result.output
        assert "gpt-3.5-turbo" in result.output
        assert "not set" in result.output

    def test_set_then_show_masks_key(self, settings_file):
        result = _invoke(settings_file, "settings", "set", "--api-key", "sk-abcdef12")
        assert result.exit_code == 0
        assert "Saved" in result.output
        assert json.loads(settings_file.read_text())["api_key"] == "sk-abcdef12"

        result = _invoke(settings_file, "settings", "show")
        assert result.exit_code == 0
        assert "ef12" in result.output
        assert "sk-abcdef12" not in result.output

    def test_set_model(self, settings_file):
        result = _invoke(settings_file, "settings", "set", "--model", "gpt-4")
        assert result.exit_code == 0
        assert json.loads(settings_file.read_text())["ai_model"] == "gpt-4"

    def test_unknown_model_rejected(self, settings_file):
        result = _invoke(settings_file, "settings", "set", "--model", "claude-3")
        assert result.exit_code == 1
        assert "is not offered by" in result.output
        assert not settings_file.exists()

    def test_unsupported_provider_rejected(self, settings_file):
        result = _invoke(settings_file, "settings", "set", "--provider", "unsupported")
        assert result.exit_code == 1
        assert "Unsupported AI provider" in result.output
        assert not settings_file.exists()

    def test_nothing_to_change(self, settings_file):
        result = _invoke(settings_file, "settings", "set", "--provider", "openai")
        assert result.exit_code == 0
        assert "Nothing to change" in result.output
        assert not settings_file.exists()

    def test_settings_path_from_environment(self, settings_file, monkeypatch):
        monkeypatch.setenv("AICHAT_SETTINGS_PATH", str(settings_file))
        result = runner.invoke(app, ["settings", "set", "--api-key", "sk-env"])
        assert result.exit_code == 0
        assert json.loads(settings_file.read_text())["api_key"] == "sk-env"


class TestAskCommand:
    """Tests for `aichat ask`."""

    def _patch_controller(self, monkeypatch, transport) -> None:
        def get_controller(*args, **kwargs):
            controller = ChatController(
                InMemorySettingsStore({"api_key": "sk-test"}),
                provider_factory=transport.provider_factory(),
            )
            controller.load_settings()
            return controller

        monkeypatch.setattr("aichat.cli.app.get_controller", get_controller)

    def test_requires_api_key(self, settings_file):
        result = _invoke(settings_file, "ask", "hi")
        assert result.exit_code == 1
        assert "no API key configured" in result.output

    def test_prints_reply(self, monkeypatch, reply_transport):
        transport = reply_transport("hello there")
        self._patch_controller(monkeypatch, transport)

        result = runner.invoke(app, ["ask", "hi", "you"])

        assert result.exit_code == 0
        assert "hello there" in result.output
        body = json.loads(transport.requests[0].content)
        assert body["messages"] == [{"role": "user", "content": "hi you"}]

    def test_provider_error_exits_nonzero(self, monkeypatch, error_transport):
        transport = error_transport(401, json={"error": {"message": "bad key"}})
        self._patch_controller(monkeypatch, transport)

        result = runner.invoke(app, ["ask", "hi"])

        assert result.exit_code == 1
        assert "Error: bad key" in result.output
