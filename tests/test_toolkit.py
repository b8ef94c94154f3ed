import io

import pytest
from rich.console import Console

from apps.cli import toolkit
from wordlekit.engine import CandidateStore
from wordlekit.engine.ranking import ScoringConfig

CFG = ScoringConfig()


def _console():
    buf = io.StringIO()
    return Console(file=buf, width=200, force_terminal=False, color_system=None), buf


def scripted(*lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None
    return read


@pytest.fixture
def store():
    return CandidateStore(["crane", "raise", "stare", "trace", "scoop"])


def test_feedback_narrows_and_suggests(store):
    con, buf = _console()
    assert toolkit.handle_solver_command(con, store, CFG, "feedback raise yybbg") is True
    out = buf.getvalue()
    assert "2 words remaining" in out
    assert "Next suggestion: trace" in out
    assert store.words == ("crane", "trace")


@pytest.mark.parametrize("line,needle", [
    ("feedback cranes ggggg", "Word must be 5 letters"),
    ("feedback cr4ne ggggg", "Word must be 5 letters"),
    ("feedback crane gggxg", "Feedback Guide"),
    ("feedback crane gggg", "Feedback Guide"),
    ("feedback crane", "Usage: feedback"),
])
def test_bad_feedback_leaves_store_untouched(store, line, needle):
    con, buf = _console()
    before = store.words
    toolkit.handle_solver_command(con, store, CFG, line)
    assert needle in buf.getvalue()
    assert store.words == before
    assert store.history == []


def test_contradictory_feedback_reports_empty():
    store = CandidateStore(["apple", "grape"])
    con, buf = _console()
    toolkit.handle_solver_command(con, store, CFG, "feedback apple bbbbb")
    out = buf.getvalue()
    assert "No words remaining" in out
    assert "Check your feedback" in out
    toolkit.handle_solver_command(con, store, CFG, "suggest")
    assert buf.getvalue().count("No words remaining") == 2


def test_show_lists_first_ten():
    words = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone",
             "slate", "roate", "arise", "speed", "geese"]
    con, buf = _console()
    toolkit.handle_solver_command(con, CandidateStore(words), CFG, "show")
    out = buf.getvalue()
    assert "Possible words (12)" in out
    assert "... and 2 more" in out
    assert "speed" not in out


def test_top_and_unknown(store):
    con, buf = _console()
    toolkit.handle_solver_command(con, store, CFG, "top 2")
    toolkit.handle_solver_command(con, store, CFG, "top x")
    toolkit.handle_solver_command(con, store, CFG, "dance")
    out = buf.getvalue()
    assert "1. stare" in out and "2. raise" in out
    assert "Usage: top" in out
    assert "Unknown command" in out


def test_quit(store):
    con, _ = _console()
    assert toolkit.handle_solver_command(con, store, CFG, "quit") is False


def test_run_solver_mode_until_eof(store):
    con, buf = _console()
    toolkit.run_solver_mode(con, store, CFG, read=scripted("suggest", "help"))
    out = buf.getvalue()
    assert "Suggested starting word: stare" in out
    assert "Suggested word: stare" in out


def test_read_target():
    con, buf = _console()
    assert toolkit.read_target(" Crane ", con) == "crane"
    assert toolkit.read_target("toolong", con) == "hello"
    assert toolkit.read_target(None, con) == "hello"
    assert "Using 'hello'" in buf.getvalue()


def test_run_art_mode():
    store = CandidateStore(["hello", "hillo", "hells"])
    con, buf = _console()
    toolkit.run_art_mode(con, store, read=scripted("HELLO", "ggggg", "xxxxx", "bbbbb", "quit", "ggggg"))
    out = buf.getvalue()
    assert "Target word set to: hello" in out
    assert "Found 1 words" in out
    assert "Invalid pattern format" in out
    assert "No words found" in out
    assert out.count("Found 1 words") == 1


def test_art_pattern_truncates_long_results():
    words = [f"{c}ells" for c in "bcdfghjkmnpqrtwy"]
    con, buf = _console()
    toolkit.handle_art_pattern(con, CandidateStore(words), "zells", "bgggg")
    out = buf.getvalue()
    assert "Found 16 words" in out
    assert "... and 6 more words" in out


def test_main_missing_word_list(tmp_path, capsys):
    assert toolkit.main(["--words", str(tmp_path / "nope.txt")]) == 2
    assert "Error" in capsys.readouterr().out


@pytest.mark.parametrize("line", ["top 0", "top -3"])
def test_top_rejects_non_positive_count(store, line):
    con, buf = _console()
    toolkit.handle_solver_command(con, store, CFG, line)
    out = buf.getvalue()
    assert "Usage: top" in out
    assert "1." not in out
