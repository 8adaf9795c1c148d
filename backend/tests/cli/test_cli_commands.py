"""CLI commands — read, cheep, help, version, and unknown input."""

from datetime import timezone

import typer
from typer.testing import CliRunner

from chirp.cli import main as cli
from chirp.cli.csv_store import CheepRecord, CSVDatabase
from chirp.cli.user_interface import format_cheep

runner = CliRunner()


def test_format_cheep():
    record = CheepRecord("ropf", "Hello, BDSA students!", 1690891760)
    assert format_cheep(record, timezone.utc) == (
        "ropf @ 08/01/23 12:09:20: Hello, BDSA students!"
    )


def test_cheep_appends_record(csv_path, monkeypatch):
    monkeypatch.setattr(cli, "current_user", lambda: "ada")
    monkeypatch.setattr(cli, "now_unix", lambda: 1000)

    result = runner.invoke(cli.app, ["cheep", "hello there"])

    assert result.exit_code == 0
    assert CSVDatabase(csv_path).read() == [CheepRecord("ada", "hello there", 1000)]


def test_read_prints_last_ten(csv_path, monkeypatch):
    db = CSVDatabase(csv_path)
    for i in range(12):
        db.store(CheepRecord("ada", f"message {i}", 1000 + i))
    monkeypatch.setattr(
        cli, "print_cheeps",
        lambda records: printed.extend(records),
    )
    printed = []

    result = runner.invoke(cli.app, ["read"])

    assert result.exit_code == 0
    assert [r.message for r in printed] == [f"message {i}" for i in range(2, 12)]


def test_read_output_lines(csv_path):
    CSVDatabase(csv_path).store(CheepRecord("ada", "hi [bold]there[/bold]", 0))
    result = runner.invoke(cli.app, ["read"])
    assert result.exit_code == 0
    assert "ada @ " in result.output
    assert result.output.rstrip().endswith(": hi [bold]there[/bold]")


def test_version():
    result = runner.invoke(cli.app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == "Chirp 1.0"


def test_short_help_flag():
    result = runner.invoke(cli.app, ["-h"])
    assert result.exit_code == 0
    assert "read" in result.output
    assert "cheep" in result.output


def test_no_command_prints_hint():
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 0
    assert result.output.strip() == cli.UNKNOWN_ARGUMENT


def test_unknown_command_prints_hint_and_exits_zero(csv_path, capsys):
    """An unknown subcommand is a usage error, reported as a hint with exit 0."""
    assert cli.run(["shout", "hello"]) == 0
    assert cli.UNKNOWN_ARGUMENT in capsys.readouterr().out
    assert not csv_path.exists()


def test_cheep_without_message_prints_hint(csv_path, capsys):
    """A missing message argument is reported the same way as an unknown command."""
    assert cli.run(["cheep"]) == 0
    assert cli.UNKNOWN_ARGUMENT in capsys.readouterr().out


def test_run_executes_commands(csv_path, monkeypatch):
    monkeypatch.setattr(cli, "current_user", lambda: "bob")
    monkeypatch.setattr(cli, "now_unix", lambda: 42)
    assert cli.run(["cheep", "via run"]) == 0
    assert CSVDatabase(csv_path).read() == [CheepRecord("bob", "via run", 42)]


def test_unknown_option_prints_hint_and_exits_zero(csv_path, capsys):
    """Unknown options surface as typer's own parse errors and still exit 0."""
    assert cli.run(["--bogus"]) == 0
    assert cli.run(["read", "--bogus"]) == 0
    assert capsys.readouterr().out.count(cli.UNKNOWN_ARGUMENT) == 2


def test_usage_error_matches_typer_parse_errors():
    """The caught base class covers every parameter error typer raises."""
    assert issubclass(typer.BadParameter, cli.UsageError)
    assert cli.UsageError.__name__ == "UsageError"
