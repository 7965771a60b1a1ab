"""Tests for the command-line interface."""

import pytest
from pokermojo.__main__ import main
from pokermojo.core.pairlog import read_pairs


class TestEvaluateCommand:
    def test_single_hand(self, capsys):
        main(["evaluate", "As Ks Qs Js 10s"])
        out = capsys.readouterr().out
        assert "Royal Flush" in out

    def test_two_hands(self, capsys):
        main(["evaluate", "9h 9d 9c 5h 5s", "As Ks Qs Js 10s"])
        out = capsys.readouterr().out
        assert "Full House" in out
        assert "B wins" in out

    def test_tie(self, capsys):
        main(["evaluate", "As Ah Kh Qc Jd", "Ad Ac Kd Qs Jh"])
        assert "Tie" in capsys.readouterr().out

    def test_bad_card_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["evaluate", "As Ks Qs Js 1s"])
        assert exc.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_three_hands_rejected(self):
        with pytest.raises(SystemExit):
            main(["evaluate", "As Ks Qs Js 10s", "2c 3c 4c 5c 7d", "9h 9d 9c 5h 5s"])


class TestDealCommand:
    def test_writes_log_and_replays(self, tmp_output, capsys):
        main(["deal", "--mode", "hard", "--rounds", "4", "--seed", "5", "-o", str(tmp_output)])
        logs = list(tmp_output.glob("*.jsonl"))
        assert len(logs) == 1
        capsys.readouterr()

        main(["replay", str(logs[0])])
        assert "4 pairs verified" in capsys.readouterr().out

    def test_second_deal_replaces_log(self, tmp_output, capsys):
        main(["deal", "--rounds", "3", "--seed", "1", "-o", str(tmp_output)])
        main(["deal", "--rounds", "3", "--seed", "2", "-o", str(tmp_output)])
        capsys.readouterr()

        log = tmp_output / "cli.jsonl"
        lines = log.read_text().strip().split("\n")
        assert len(read_pairs(log)) == 3
        assert sum("session_summary" in line for line in lines) == 1

    @pytest.mark.parametrize("rounds", ["0", "-2"])
    def test_non_positive_rounds_rejected(self, rounds, tmp_output, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["deal", "--rounds", rounds, "--seed", "1", "-o", str(tmp_output)])
        assert exc.value.code == 1
        assert "rounds" in capsys.readouterr().err
        assert not (tmp_output / "cli.jsonl").exists()

    def test_missing_config_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["deal", "--config", str(tmp_path / "nope.yaml")])
        assert exc.value.code == 1


class TestAuditCommand:
    def test_library_passes(self, capsys):
        main(["audit", "--trials", "10"])
        assert "scenarios OK" in capsys.readouterr().out
