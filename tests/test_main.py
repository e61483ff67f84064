"""Unit tests for the CLI entry point."""
from unittest.mock import patch

from app import main as cli


class ScriptedInput:
    def __init__(self, lines):
        self.lines = list(lines)

    def __call__(self, prompt):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class TestPromptApiKey:
    """Test suite for reading the API key."""

    def test_typed_key_used(self):
        assert cli.prompt_api_key(ScriptedInput(["  sk-typed  "])) == "sk-typed"

    def test_blank_key_falls_back_to_environment(self):
        """Test OPENAI_API_KEY is used when nothing is typed."""
        with patch.object(cli, "OPENAI_API_KEY", "sk-env"):
            assert cli.prompt_api_key(ScriptedInput([""])) == "sk-env"

    def test_closed_stdin(self):
        assert cli.prompt_api_key(ScriptedInput([])) is None


class TestMain:
    """Test suite for main()."""

    @patch.object(cli, "ChatSession")
    def test_runs_session_and_returns_zero(self, mock_session_class):
        """Test main wires the session with the typed key and exits 0."""
        code = cli.main(input_fn=ScriptedInput(["sk-typed"]), output_fn=lambda _: None)

        assert code == 0
        assert mock_session_class.call_args.kwargs["api_key"] == "sk-typed"
        mock_session_class.return_value.run.assert_called_once()

    @patch.object(cli, "ChatSession")
    def test_no_key_input_exits_cleanly(self, mock_session_class):
        """Test closed stdin at the key prompt exits 0 without a session."""
        output = []

        assert cli.main(input_fn=ScriptedInput([]), output_fn=output.append) == 0
        assert output == ["Goodbye!"]
        mock_session_class.assert_not_called()
