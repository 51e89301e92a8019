"""Tests for the command-line front end."""

from __future__ import annotations

import json

import pytest

from cnpcheck.cli import main


def test_valid_code_exits_zero(capsys):
    assert main(["1800101221144"]) == 0
    assert capsys.readouterr().out.strip() == "1800101221144: valid"


def test_any_invalid_code_exits_one(capsys):
    assert main(["1800101221144", "1800101221145"]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "1800101221145: invalid (bad_checksum)"


def test_future_dates_with_fixed_today(capsys):
    assert main(["--no-future-dates", "--today", "2026-10-18", "5300101401232"]) == 1
    assert "bad_date" in capsys.readouterr().out
    assert main(["--allow-future-dates", "--today", "2026-10-18", "5300101401232"]) == 0


def test_json_output(capsys):
    main(["--json", "1900431401230"])
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"cnp": "1900431401230", "valid": False, "reason": "bad_date"}


def test_details_output(capsys):
    assert main(["--details", "--json", "1800101221144"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["birth_date"] == "1980-01-01"
    assert payload["county_code"] == "22"


def test_details_text_for_invalid(capsys):
    assert main(["--details", "0800101221144"]) == 1
    assert capsys.readouterr().out.strip() == "0800101221144: invalid (bad_format)"


def test_bad_today_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--today", "yesterday", "1800101221144"])
    assert excinfo.value.code == 2
