"""Integration tests for the command line interface."""

import json

import pytest

from prompt_render_sdk.cli import main, parse_variables, CLIError


@pytest.fixture
def prompt_file(tmp_path):
    path = tmp_path / "prompt.json"
    path.write_text(json.dumps({"system": ["Be helpful"], "user_template": "Hello {{name}}"}))
    return path


@pytest.mark.integration
class TestCLI:

    def test_list_providers(self, capsys):
        assert main(["list-providers"]) == 0
        providers = json.loads(capsys.readouterr().out)
        assert [p["id"] for p in providers] == ["openai", "anthropic", "meta", "microsoft-copilot"]

    def test_list_providers_respects_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("PROMPT_RENDER_PROVIDERS", "meta")
        assert main(["list-providers"]) == 0
        assert [p["id"] for p in json.loads(capsys.readouterr().out)] == ["meta"]

    def test_models(self, capsys):
        assert main(["models", "anthropic"]) == 0
        models = json.loads(capsys.readouterr().out)
        assert models[0]["id"] == "claude-3-5-sonnet-20241022"
        assert all(m["context_length"] == 200000 for m in models)

    def test_render(self, capsys, prompt_file):
        code = main(["render", "openai", str(prompt_file), "--model", "gpt-4", "--var", "name=Ada", "--temperature", "0.2"])

        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["content"]["messages"][1] == {"role": "user", "content": "Hello Ada"}
        assert payload["content"]["temperature"] == 0.2

    def test_render_uses_default_model(self, capsys, prompt_file):
        assert main(["render", "anthropic", str(prompt_file)]) == 0
        assert json.loads(capsys.readouterr().out)["model"] == "claude-3-5-sonnet-20241022"

    def test_render_error(self, capsys, prompt_file):
        code = main(["render", "anthropic", str(prompt_file), "--model", "claude-3-opus-20240229", "--temperature", "1.5"])

        assert code == 1
        err = capsys.readouterr().err
        assert "Error: Invalid render options: Temperature must be between 0 and 1 for Anthropic" in err

    def test_unknown_provider(self, capsys):
        assert main(["models", "cohere"]) == 1
        assert "Provider adapter with id 'cohere' not found" in capsys.readouterr().err

    def test_missing_file(self, capsys, tmp_path):
        assert main(["render", "openai", str(tmp_path / "missing.json")]) == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_validate(self, capsys, tmp_path):
        path = tmp_path / "payload.json"
        path.write_text(json.dumps({
            "provider": "anthropic",
            "model": "claude-3-opus-20240229",
            "content": {"model": "claude-3-opus-20240229", "messages": [{"role": "user", "content": "Hi"}]},
        }))

        assert main(["validate", str(path)]) == 1
        result = json.loads(capsys.readouterr().out)
        assert result == {"is_valid": False, "errors": ["max_tokens is required for Anthropic API"]}

    def test_validate_without_top_level_model(self, capsys, tmp_path):
        path = tmp_path / "payload.json"
        path.write_text(json.dumps({
            "provider": "openai",
            "content": {"model": "gpt-4", "messages": [{"role": "user", "content": "Hi"}]},
        }))

        assert main(["validate", str(path)]) == 0
        assert json.loads(capsys.readouterr().out) == {"is_valid": True, "errors": []}

    def test_validate_without_provider(self, capsys, tmp_path):
        path = tmp_path / "payload.json"
        path.write_text(json.dumps({"content": {}}))

        assert main(["validate", str(path)]) == 1
        assert "has no provider field" in capsys.readouterr().err

    def test_recommend(self, capsys):
        assert main(["recommend", "--min-context", "150000"]) == 0
        assert [p["id"] for p in json.loads(capsys.readouterr().out)] == ["anthropic"]

    def test_recommend_without_system_messages(self, capsys):
        assert main(["recommend", "--no-system-messages"]) == 0
        assert json.loads(capsys.readouterr().out) == []

    def test_no_command(self, capsys):
        assert main([]) == 1


@pytest.mark.unit
class TestParseVariables:

    def test_pairs(self):
        assert parse_variables(["a=1", "b=x=y", "c="]) == {"a": "1", "b": "x=y", "c": ""}

    def test_invalid_pair(self):
        with pytest.raises(CLIError, match="Invalid variable 'oops'"):
            parse_variables(["oops"])
