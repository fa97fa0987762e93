"""Tests for CLI functionality."""

from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner
from rich.console import Console

from sqlsanitize.cli.commands import SanitizeCommandHandler, build_registry
from sqlsanitize.cli.main import cli, main
from sqlsanitize.core.orchestrator import CONFIRM_QUESTION
from sqlsanitize.core.registry import HandlerRegistry, Phase
from sqlsanitize.utils.display_utils import AutoConfirmer, InteractiveConfirmer
from sqlsanitize.utils.rich_utils import SANITIZE_THEME


class TestCLIMain:
    """Test main CLI functionality."""

    def test_cli_help(self):
        """Test CLI help output."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "sqlsanitize" in result.output
        assert "sql-sanitize" in result.output
        assert "handlers" in result.output

    def test_cli_no_command(self):
        """Test CLI with no command shows help."""
        runner = CliRunner()
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "scrub user data" in result.output

    def test_sql_sanitize_help(self):
        """Test the command documents its options."""
        runner = CliRunner()
        result = runner.invoke(cli, ["sql-sanitize", "--help"])

        assert result.exit_code == 0
        for option in (
            "--db-prefix",
            "--db-url",
            "--sanitize-email",
            "--sanitize-password",
            "--whitelist-fields",
        ):
            assert option in result.output

    @patch("sqlsanitize.cli.main.SanitizeCommandHandler")
    def test_sql_sanitize_defaults(self, mock_handler_class):
        """Test default option values are passed to the handler."""
        mock_handler = MagicMock()
        mock_handler.handle_sql_sanitize.return_value = True
        mock_handler_class.return_value = mock_handler

        runner = CliRunner()
        result = runner.invoke(cli, ["sql-sanitize"])

        assert result.exit_code == 0
        mock_handler.handle_sql_sanitize.assert_called_once_with(
            db_prefix=False,
            db_url="",
            sanitize_email="user+%uid@localhost.localdomain",
            sanitize_password="password",
            whitelist_fields="",
            assume_yes=False,
            assume_no=False,
        )

    @patch("sqlsanitize.cli.main.SanitizeCommandHandler")
    def test_alias(self, mock_handler_class):
        """Test sqlsan runs the same command."""
        mock_handler = MagicMock()
        mock_handler.handle_sql_sanitize.return_value = True
        mock_handler_class.return_value = mock_handler

        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "sqlsan",
                "--db-prefix",
                "--db-url",
                "sqlite:///copy.db",
                "--sanitize-password=no",
                "--whitelist-fields=field_bio,field_phone",
                "-y",
            ],
        )

        assert result.exit_code == 0
        kwargs = mock_handler.handle_sql_sanitize.call_args.kwargs
        assert kwargs["db_prefix"] is True
        assert kwargs["db_url"] == "sqlite:///copy.db"
        assert kwargs["sanitize_password"] == "no"
        assert kwargs["whitelist_fields"] == "field_bio,field_phone"
        assert kwargs["assume_yes"] is True

    @patch("sqlsanitize.cli.main.SanitizeCommandHandler")
    def test_failure_exit_code(self, mock_handler_class):
        """Test a failed operation exits with status 1."""
        mock_handler = MagicMock()
        mock_handler.handle_sql_sanitize.return_value = False
        mock_handler_class.return_value = mock_handler

        runner = CliRunner()
        result = runner.invoke(cli, ["sql-sanitize", "-y"])

        assert result.exit_code == 1

    def test_yes_and_no_conflict(self):
        """Test --yes and --no cannot be combined."""
        runner = CliRunner()
        result = runner.invoke(cli, ["sql-sanitize", "-y", "-n"])

        assert result.exit_code == 2
        assert "cannot be used together" in result.output

    @patch("sqlsanitize.cli.main.SanitizeCommandHandler")
    def test_handlers_command(self, mock_handler_class):
        """Test the handlers command lists registrations."""
        mock_handler = MagicMock()
        mock_handler_class.return_value = mock_handler

        runner = CliRunner()
        result = runner.invoke(cli, ["handlers"])

        assert result.exit_code == 0
        mock_handler.handle_list_handlers.assert_called_once()


class TestMainEntryPoint:
    """Test exit handling of main()."""

    def run_main(self, *args):
        with patch("sys.argv", ["sqlsanitize", *args]), patch(
            "sqlsanitize.cli.main.install_rich_tracebacks"
        ):
            main()

    @patch("sqlsanitize.cli.main.SanitizeCommandHandler")
    def test_interrupt_exits_cleanly(self, mock_handler_class, capsys):
        """Test Ctrl+C during a run exits with status 0."""
        mock_handler_class.return_value.handle_sql_sanitize.side_effect = (
            KeyboardInterrupt
        )

        with pytest.raises(SystemExit) as exc_info:
            self.run_main("sql-sanitize", "-y")

        assert exc_info.value.code == 0
        assert "Operation interrupted by user." in capsys.readouterr().out

    def test_usage_error(self, capsys):
        """Test usage errors keep click's exit status and message."""
        with pytest.raises(SystemExit) as exc_info:
            self.run_main("sql-sanitize", "-y", "-n")

        assert exc_info.value.code == 2
        assert "cannot be used together" in capsys.readouterr().err

    @patch("sqlsanitize.cli.main.SanitizeCommandHandler")
    def test_failure_exit_code(self, mock_handler_class):
        """Test a failed run exits with status 1."""
        mock_handler_class.return_value.handle_sql_sanitize.return_value = False

        with pytest.raises(SystemExit) as exc_info:
            self.run_main("sqlsan", "-y")

        assert exc_info.value.code == 1

    def test_help_returns(self, capsys):
        """Test --help prints usage without exiting with an error."""
        self.run_main("--help")
        assert "sql-sanitize" in capsys.readouterr().out


class TestEndToEnd:
    """Run the real command against a SQLite database."""

    def test_confirmed_run_sanitizes(self, db_url, query):
        """Test an accepted run previews then sanitizes every table."""
        runner = CliRunner()
        result = runner.invoke(cli, ["sqlsan", "--db-url", db_url], input="y\n")

        assert result.exit_code == 0, result.output
        assert "The following operations will be performed:" in result.output
        assert "* Sanitize user passwords." in result.output
        assert "* Sanitize user emails." in result.output
        assert "* Truncate sessions table." in result.output
        assert CONFIRM_QUESTION in result.output
        assert query("SELECT * FROM sessions") == []
        assert query("SELECT mail FROM users_field_data WHERE uid = 1") == [
            ("user+1@localhost.localdomain",)
        ]

    def test_declined_run_changes_nothing(self, db_url, query):
        """Test a declined run aborts calmly and leaves data in place."""
        runner = CliRunner()
        result = runner.invoke(cli, ["sql-sanitize", "--db-url", db_url], input="n\n")

        assert result.exit_code == 0
        assert "Aborted." in result.output
        assert len(query("SELECT * FROM sessions")) == 2
        assert query("SELECT mail FROM users_field_data WHERE uid = 1") == [
            ("jane@example.com",)
        ]

    @patch.dict("os.environ", {}, clear=True)
    @patch("sqlsanitize.core.config.check_env_file")
    def test_missing_database_fails(self, mock_check_env):
        """Test a run without a database URL fails before prompting."""
        runner = CliRunner()
        result = runner.invoke(cli, ["sql-sanitize", "-y"])

        assert result.exit_code == 1
        assert CONFIRM_QUESTION not in result.output
        assert "No database URL configured" in result.output


class TestSanitizeCommandHandler:
    """Test SanitizeCommandHandler."""

    def test_build_registry_has_builtin_sanitizers(self):
        """Test the default registry pairs providers and actions."""
        registry = build_registry()

        assert len(registry.lookup(Phase.CONFIRM)) == 3
        assert len(registry.lookup(Phase.EXECUTE)) == 3

    def test_make_confirmer(self):
        """Test the decision source follows --yes / --no."""
        handler = SanitizeCommandHandler(HandlerRegistry())

        assert handler._make_confirmer(True, False).answer is True
        assert handler._make_confirmer(False, True).answer is False
        assert isinstance(handler._make_confirmer(False, False), InteractiveConfirmer)

    def test_empty_registry_still_prompts(self, capsys):
        """Test a handler-less run prompts and succeeds."""
        handler = SanitizeCommandHandler(HandlerRegistry())
        confirmer = AutoConfirmer(True, echo=None)

        with patch.object(handler, "_make_confirmer", return_value=confirmer):
            assert handler.handle_sql_sanitize(False, "", "no", "no", "")

        assert confirmer.questions == [CONFIRM_QUESTION]
        assert "No sanitize actions are registered." in capsys.readouterr().out

    def test_invalid_whitelist(self, capsys):
        """Test invalid options are reported without running anything."""
        registry = HandlerRegistry()
        action = MagicMock()
        registry.register(Phase.EXECUTE, action)
        handler = SanitizeCommandHandler(registry)

        assert not handler.handle_sql_sanitize(
            False, "", "no", "no", "bad field", assume_yes=True
        )
        action.assert_not_called()
        assert "Invalid option" in capsys.readouterr().err

    def test_action_failure_reported(self, capsys):
        """Test a failing action makes the handler report failure."""
        registry = HandlerRegistry()
        registry.register(Phase.EXECUTE, MagicMock(side_effect=RuntimeError("boom")))
        handler = SanitizeCommandHandler(registry)

        assert not handler.handle_sql_sanitize(
            False, "", "no", "no", "", assume_yes=True
        )
        assert "Sanitization failed" in capsys.readouterr().err

    def test_list_handlers_empty(self, capsys):
        """Test listing with nothing registered."""
        SanitizeCommandHandler(HandlerRegistry()).handle_list_handlers()
        assert "No sanitize handlers are registered." in capsys.readouterr().out

    def test_list_handlers_table(self):
        """Test registered handlers are listed in invocation order."""
        console = Console(file=StringIO(), width=200, theme=SANITIZE_THEME)

        with patch("sqlsanitize.cli.commands.get_console", return_value=console):
            SanitizeCommandHandler(build_registry()).handle_list_handlers()

        output = console.file.getvalue()
        assert "sql-sanitize-confirms" in output
        assert "UserTableSanitizer.messages" in output
        assert output.index("UserTableSanitizer.sanitize") < output.index(
            "SessionSanitizer.sanitize"
        )
