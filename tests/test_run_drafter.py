"""Tests for the command-line entry point."""

import io
import json

import pytest

from run_drafter import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("run_drafter.configure_logging", lambda level: None)
    for name in (
        "REPLY_DRAFTER_LOCALE",
        "REPLY_DRAFTER_DELAY_SECONDS",
        "REPLY_DRAFTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_prints_draft(capsys):
    code = main(["This is an urgent contract issue", "--subject", "Contract"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Re: Contract" in out
    assert "responsive and efficient" in out


def test_json_output(capsys):
    code = main(["Thanks for dinner last night!", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["category"] == "personal"
    assert payload["subject"] == "Re: No subject"
    assert set(payload) == {"subject", "body", "tone", "remarks", "category"}


def test_reads_body_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Can we schedule a meeting next week?"))
    code = main(["--json"])
    assert code == 0
    assert json.loads(capsys.readouterr().out)["category"] == "professional"


def test_locale_option(capsys):
    code = main(["Merci de répondre rapidement", "--locale", "fr", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["category"] == "urgent"
    assert payload["tone"] == "réactif et efficace"


def test_blank_body(capsys):
    code = main(["   "])
    assert code == 2
    assert "empty" in capsys.readouterr().err


def test_bad_configuration(monkeypatch, capsys):
    monkeypatch.setenv("REPLY_DRAFTER_LOCALE", "xx")
    assert main(["hello"]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_locale_option_overrides_environment(monkeypatch, capsys):
    """--locale wins over an invalid REPLY_DRAFTER_LOCALE"""
    monkeypatch.setenv("REPLY_DRAFTER_LOCALE", "xx")
    code = main(["Merci de répondre rapidement", "--locale", "fr", "--json"])
    assert code == 0
    assert json.loads(capsys.readouterr().out)["category"] == "urgent"
