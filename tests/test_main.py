"""Тесты консольных утилит."""

import io

import pytest

from emailaddress.config import get_settings
from emailaddress.main import BANNER, main, report, run_interactive
from emailaddress.tools import compare_addresses


def test_report_prints_verdict() -> None:
    stream = io.StringIO()

    assert report("test@test.net", get_settings(), stream) is True
    assert stream.getvalue() == "test@test.net is a valid email address\n"


def test_report_prints_reason_for_invalid_address() -> None:
    stream = io.StringIO()

    assert report("test@", get_settings(), stream) is False
    assert stream.getvalue().splitlines() == [
        "domain part can't be empty",
        "test@ is invalid email address",
    ]


def test_report_hides_reason_when_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMAILADDRESS_SHOW_REASON", "false")
    get_settings.cache_clear()  # type: ignore[attr-defined]
    stream = io.StringIO()

    report("test@", get_settings(), stream)

    assert stream.getvalue() == "test@ is invalid email address\n"


def test_run_interactive_skips_blank_lines() -> None:
    stream = io.StringIO()
    lines = io.StringIO("  test@test.net \n\nwe..johnny@test.net\n")

    assert run_interactive(lines, get_settings(), stream) is False

    assert stream.getvalue().splitlines() == [
        "test@test.net is a valid email address",
        "fail to parse localPart of the email address",
        "we..johnny@test.net is invalid email address",
    ]


def test_main_with_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["test@test.net", "x@example.com"]) == 0
    assert main(["test@test.net", "plain"]) == 1

    output = capsys.readouterr().out
    assert "plain is invalid email address" in output


def test_main_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("EMAILADDRESS_SHOW_BANNER", "true")
    get_settings.cache_clear()  # type: ignore[attr-defined]
    monkeypatch.setattr("sys.stdin", io.StringIO("simple@example.com\n"))

    assert main([]) == 0

    output = capsys.readouterr().out
    assert BANNER.strip() in output
    assert "simple@example.com is a valid email address" in output


def test_main_no_banner_flag(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("EMAILADDRESS_SHOW_BANNER", "true")
    get_settings.cache_clear()  # type: ignore[attr-defined]
    monkeypatch.setattr("sys.stdin", io.StringIO("@example.com\n"))

    assert main(["--no-banner"]) == 1

    output = capsys.readouterr().out
    assert "####" not in output
    assert "email address can't start with '@'" in output


def test_compare_cli(capsys: pytest.CaptureFixture[str]) -> None:
    assert compare_addresses.main(["Test+x@test.net", "test@TEST.net"]) == 0
    assert capsys.readouterr().out == "equal\n"

    assert compare_addresses.main(["a@test.net", "b@test.net"]) == 1
    assert capsys.readouterr().out == "different\n"
