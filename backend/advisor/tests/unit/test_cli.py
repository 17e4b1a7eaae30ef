import json
import logging

import pytest

from advisor.cli.app import EXIT_BAD_INPUT, EXIT_OK, build_parser, main, render_text
from advisor.logic.analysis import analyze_hand
from advisor.tests.conftest import make_hand


@pytest.fixture(autouse=True)
def _cleanup_root_logger():
    """main() installs its own handlers; drop them so later tests start clean."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


class TestBuildParser:
    def test_hand_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_defaults(self):
        args = build_parser().parse_args(["--hand", "111234m567p111s55m"])
        assert args.wildcard is None
        assert args.json is False


class TestMain:
    def test_json_output_for_complete_hand(self, capsys):
        exit_code = main(["--hand", "111234m567p111s55m", "--json"])

        assert exit_code == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert payload["shanten"] == -1
        assert payload["suggestions"] == [
            {
                "kind": "win",
                "discard": "win",
                "score": 9999,
                "waiting_tiles": ["self-draw"],
                "comment": "hand is already complete",
            },
        ]

    def test_text_output_for_tenpai_hand(self, capsys):
        exit_code = main(["--hand", "123456789m22p23s9s"])

        assert exit_code == EXIT_OK
        out = capsys.readouterr().out
        assert "Hand: 123456789m22p239s" in out
        assert "Shanten: tenpai" in out
        assert "1. 9s" in out
        assert "[1s 4s]" in out

    def test_wildcard_is_shown_and_used(self, capsys):
        exit_code = main(["--hand", "123456789m55s79s6p", "--wildcard", "6p"])

        assert exit_code == EXIT_OK
        out = capsys.readouterr().out
        assert "Wildcard: 6p" in out
        assert "Shanten: complete" in out

    def test_wrong_hand_size_is_rejected(self, capsys):
        exit_code = main(["--hand", "123456789m22p23s"])

        assert exit_code == EXIT_BAD_INPUT
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "exactly 14 tiles" in captured.err

    def test_malformed_hand_is_rejected(self, capsys):
        exit_code = main(["--hand", "12x"])

        assert exit_code == EXIT_BAD_INPUT
        assert "malformed tile notation" in capsys.readouterr().err

    def test_invalid_wildcard_is_rejected(self, capsys):
        exit_code = main(["--hand", "123456789m22p23s9s", "--wildcard", "8z"])

        assert exit_code == EXIT_BAD_INPUT
        assert "zihai value must be in" in capsys.readouterr().err

    def test_invalid_settings_are_rejected(self, capsys, monkeypatch):
        monkeypatch.setenv("ADVISOR_MAX_SUGGESTIONS", "0")

        exit_code = main(["--hand", "111234m567p111s55m"])

        assert exit_code == EXIT_BAD_INPUT
        assert "invalid ADVISOR_* settings" in capsys.readouterr().err

    def test_settings_limit_the_suggestions(self, capsys, monkeypatch):
        monkeypatch.setenv("ADVISOR_MAX_SUGGESTIONS", "1")

        exit_code = main(["--hand", "123456789m22p23s9s", "--json"])

        assert exit_code == EXIT_OK
        assert len(json.loads(capsys.readouterr().out)["suggestions"]) == 1


class TestRenderText:
    def test_lists_every_suggestion_in_rank_order(self):
        hand = make_hand("1223456789m555p7z")
        result = analyze_hand(hand)

        lines = render_text(hand, None, result).splitlines()

        assert lines[0] == "Hand: 1223456789m555p7z"
        assert lines[1] == "Shanten: tenpai"
        assert lines[2] == "Suggestions:"
        assert lines[3].startswith("  1. declare chun")
        assert len(lines) == 3 + len(result.suggestions)
