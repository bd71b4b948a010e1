import pytest

from handeval.__main__ import format_report, main
from handeval.models import ShowdownConfig
from handeval.showdown import deal_showdown


def test_cli_prints_streets_and_result(capsys):
    main(["--players", "3", "--seed", "7", "--ascii", "--names", "You", "Bot1", "Bot2"])
    out = capsys.readouterr().out
    for marker in ("=== FLOP ===", "=== TURN ===", "=== RIVER ===", "=== SHOWDOWN ==="):
        assert marker in out
    assert out.startswith("You: ")
    assert "WINNER:" in out or "SPLIT POT:" in out


@pytest.mark.parametrize("argv", [["--players", "1"], ["--players", "24"], ["--players", "2", "--names", "Solo"]])
def test_cli_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit):
        main(argv)


def test_format_report_lists_every_player_twice():
    report = deal_showdown(ShowdownConfig(players=4, seed=3))
    lines = format_report(report)
    for entry in report.entries:
        assert sum(line.startswith(f"{entry.name}: ") for line in lines) == 2
    assert lines[-1].startswith(("WINNER:", "SPLIT POT:"))
