import pytest

from banksystem.cli import main

SEPARATOR = "==============================="


def run(capsys):
    code = main([])
    return code, capsys.readouterr().out.splitlines()


def test_main_succeeds_and_prints_two_reports(capsys):
    code, lines = run(capsys)
    assert code == 0
    assert len(lines) == 8
    assert [lines[i] for i in (0, 3, 4, 7)] == [SEPARATOR] * 4


def test_users_listed_in_registration_order(capsys):
    _, lines = run(capsys)
    assert lines[1].startswith("User: Pesho ")
    assert lines[2].startswith("User: Ivan ")
    assert lines[5].startswith("User: Pesho ")
    assert lines[6].startswith("User: Ivan ")


def test_balances_are_in_bgn(capsys):
    _, lines = run(capsys)
    for line in (lines[1], lines[2], lines[5], lines[6]):
        assert line.endswith("BGN")


def test_final_balances(capsys):
    _, lines = run(capsys)
    assert lines[1] == "User: Pesho Balance: 29.50BGN"
    assert lines[5] == "User: Pesho Balance: 49.50BGN"
    assert lines[6] == "User: Ivan Balance: 194990.00BGN"


def test_each_run_starts_fresh(capsys):
    _, first = run(capsys)
    _, second = run(capsys)
    assert first == second


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "banksystem" in capsys.readouterr().out


def test_unknown_argument_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2