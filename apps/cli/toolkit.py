# apps/cli/toolkit.py
"""
Interactive Wordle toolkit.

Two modes over one loaded word list:
  1) Solver:   type the feedback a real puzzle gave you, get the next guess.
  2) Art tool: fix a target word, then ask which guesses would paint a given
               pattern of tiles against it.

Command handling is split into small functions that take a rich Console, so
tests can drive them with a Console writing to a StringIO.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from wordlekit.datasets import load_words
from wordlekit.engine import (
    CandidateStore, Feedback, InvalidFeedbackEncoding, InvalidWordLength,
    SourceUnavailable, find_matching, normalize_word, parse_pattern,
)
from wordlekit.engine.ranking import ScoringConfig, has_repeated_letters, rank_words

log = logging.getLogger(__name__)

SHOW_LIMIT = 10
DEFAULT_TARGET = "hello"

TILE_STYLES = {
    Feedback.CORRECT: "bold white on green",
    Feedback.MISPLACED: "bold black on yellow",
    Feedback.ABSENT: "bold white on grey37",
}

Reader = Callable[[str], str]


def render_guess(word: str, pattern: Sequence[Feedback]) -> Text:
    """Word as a row of colored tiles."""
    t = Text()
    for ch, fb in zip(word, pattern):
        t.append(f" {ch.upper()} ", style=TILE_STYLES[fb])
    return t


def print_feedback_guide(console: Console) -> None:
    console.print("\n[bold]Feedback Guide:[/bold]")
    console.print("  [green]g[/green] or [green]G[/green] = [green]GREEN[/green] (correct letter, correct position)")
    console.print("  [yellow]y[/yellow] or [yellow]Y[/yellow] = [yellow]YELLOW[/yellow] (correct letter, wrong position)")
    console.print("  [grey50]b[/grey50], [grey50]r[/grey50], [grey50]B[/grey50] or [grey50]R[/grey50] "
                  "= [grey50]GREY[/grey50] (letter not in word)")


def show_words(console: Console, store: CandidateStore, limit: int = SHOW_LIMIT) -> None:
    """Print the first `limit` candidates; bold marks words with no repeated letter."""
    head, rest = store.preview(limit)
    line = Text.from_markup(f"[cyan]Possible words ({len(store)}):[/cyan] ")
    for i, w in enumerate(head):
        if i:
            line.append(", ")
        line.append(w, style=None if has_repeated_letters(w) else "bold")
    if rest > 0:
        line.append(f" ... and {rest} more", style="grey50")
    console.print(line)


def show_top(console: Console, store: CandidateStore, config: ScoringConfig, n: int = 5) -> None:
    for i, (w, s) in enumerate(rank_words(store, config)[:n], start=1):
        console.print(f"  [cyan]{i}.[/cyan] {w}  [grey50]{s:g}[/grey50]")


def _print_suggestion(console: Console, store: CandidateStore, config: ScoringConfig, label: str) -> None:
    guess = store.suggest(config)
    if guess is None:
        console.print("[yellow]No valid words found! Check your feedback.[/yellow]")
    else:
        console.print(f"[bold]{label}: [cyan]{guess}[/cyan][/bold]")


def apply_feedback(console: Console, store: CandidateStore, config: ScoringConfig, args: str) -> None:
    """Handle `feedback <word> <code>`; bad input leaves the store untouched."""
    parts = args.split()
    if len(parts) < 2:
        console.print("[yellow]Usage: feedback <word> <feedback>[/yellow]")
        return
    try:
        word = normalize_word(parts[0])
    except InvalidWordLength:
        console.print("[yellow]Word must be 5 letters[/yellow]")
        return
    try:
        pattern = parse_pattern(parts[1])
    except InvalidFeedbackEncoding as e:
        log.debug("rejected feedback: %s", e)
        print_feedback_guide(console)
        return

    remaining = store.narrow(word, pattern)
    console.print(render_guess(word, pattern))
    if remaining:
        console.print(f"[blue]→ {remaining} words remaining[/blue]")
    else:
        console.print("[yellow]⚠ No words remaining![/yellow]")
    _print_suggestion(console, store, config, "Next suggestion")


def handle_solver_command(console: Console, store: CandidateStore, config: ScoringConfig, line: str) -> bool:
    """
    Run one solver-mode command. Returns False when the session should end.
    """
    cmd, _, rest = line.strip().partition(" ")
    if cmd == "quit":
        return False
    if cmd == "suggest":
        if store.exhausted:
            console.print("[yellow]No words remaining![/yellow]")
        else:
            _print_suggestion(console, store, config, "Suggested word")
    elif cmd == "show":
        show_words(console, store)
    elif cmd == "top":
        try:
            n = int(rest) if rest.strip() else 5
        except ValueError:
            n = 0
        if n < 1:
            console.print("[yellow]Usage: top \\[n][/yellow]  (n must be a positive integer)")
        else:
            show_top(console, store, config, n)
    elif cmd == "feedback":
        apply_feedback(console, store, config, rest)
    elif cmd == "help":
        print_solver_help(console)
    elif cmd:
        console.print("[yellow]Unknown command. Type '[green]quit[/green]' to exit.[/yellow]")
    return True


def print_solver_help(console: Console) -> None:
    console.print("[bold]Commands:[/bold]")
    console.print("  [green]suggest[/green]                - Get a word suggestion")
    console.print("  [green]feedback <word> <code>[/green] - Enter feedback (g=green, y=yellow, b/r=grey)")
    console.print("  [green]show[/green]                   - Show possible words")
    console.print("  [green]top \\[n][/green]                - Show the n best-scoring candidates")
    console.print("  [red]quit[/red]                   - Exit")


def run_solver_mode(console: Console, store: CandidateStore, config: ScoringConfig,
                    read: Optional[Reader] = None) -> None:
    read = read or console.input
    console.print("\n[bold cyan]WORDLE SOLVER MODE[/bold cyan]")
    print_solver_help(console)
    print_feedback_guide(console)
    if not store.exhausted:
        _print_suggestion(console, store, config, "Suggested starting word")

    while True:
        try:
            line = read("[bold]>[/bold] ")
        except EOFError:
            break
        if not handle_solver_command(console, store, config, line):
            break


def read_target(text: Optional[str], console: Console) -> str:
    """Normalized target word; anything unusable falls back to DEFAULT_TARGET."""
    if text is None:
        console.print(f"[yellow]Using '{DEFAULT_TARGET}' as default answer.[/yellow]")
        return DEFAULT_TARGET
    try:
        return normalize_word(text)
    except InvalidWordLength:
        console.print(f"[yellow]Word must be exactly 5 letters. Using '{DEFAULT_TARGET}' as default.[/yellow]")
        return DEFAULT_TARGET


def handle_art_pattern(console: Console, store: CandidateStore, answer: str, line: str) -> bool:
    """
    Look up one desired pattern. Returns False when the session should end.
    """
    text = line.strip()
    if text == "quit":
        return False
    try:
        desired = parse_pattern(text)
    except InvalidFeedbackEncoding:
        console.print("[yellow]Invalid pattern format. Pattern must be 5 characters using G, Y, B/R.[/yellow]")
        print_feedback_guide(console)
        return True

    matches = find_matching(store, answer, desired)
    if not matches:
        console.print(f"[yellow]No words found that produce this pattern against '{answer}'.[/yellow]")
        return True

    console.print(f"[green]✓ Found {len(matches)} words that produce this pattern against '{answer}':[/green]")
    shown = matches[:SHOW_LIMIT]
    for i, w in enumerate(shown, start=1):
        console.print(Text.assemble((f"{i}. ", "cyan"), render_guess(w, desired)))
    if len(matches) > SHOW_LIMIT:
        console.print(f"[grey50]... and {len(matches) - SHOW_LIMIT} more words[/grey50]")
    return True


def run_art_mode(console: Console, store: CandidateStore, read: Optional[Reader] = None) -> None:
    read = read or console.input
    console.print("\n[bold blue]WORDLE ART TOOL MODE[/bold blue]")
    console.print("This mode helps you find words that create specific patterns against a target word.\n")
    try:
        raw = read("Enter the target answer word: ")
    except EOFError:
        raw = None
    answer = read_target(raw, console)

    console.print(f"\n[bold]Target word set to: [cyan]{answer}[/cyan][/bold]")
    console.print("  • Enter a pattern like [cyan]GBGBG[/cyan] to find words that create that pattern")
    console.print("  • Type [red]quit[/red] to exit")
    print_feedback_guide(console)

    while True:
        try:
            line = read("\n[bold]Enter desired pattern (e.g., GBBGY) or 'quit':[/bold] ")
        except EOFError:
            break
        if not handle_art_pattern(console, store, answer, line):
            break


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordlekit: interactive solver and art tool")
    ap.add_argument("--words", default="solutions.txt", help="word list (one word per line)")
    ap.add_argument("--mode", choices=["solver", "art"],
                    help="skip the mode prompt")
    ap.add_argument("--bonus", type=float, default=ScoringConfig.distinct_bonus,
                    help="score bonus for words without repeated letters")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    console = Console()

    try:
        words = load_words(args.words)
    except SourceUnavailable as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 2
    console.print(f"[green]✓ Loaded {len(words)} words[/green]")

    store = CandidateStore(words)
    config = ScoringConfig(distinct_bonus=args.bonus)

    mode = args.mode
    if mode is None:
        console.print("[bold cyan]WORDLE TOOLKIT[/bold cyan]")
        console.print("  [green]1[/green] - Wordle Solver (help solve a puzzle)")
        console.print("  [blue]2[/blue] - Wordle Art Tool (find words that create specific patterns)")
        try:
            choice = console.input("\n[bold]Choose mode (1 or 2):[/bold] ").strip()
        except EOFError:
            choice = ""
        mode = "art" if choice == "2" else "solver"

    if mode == "art":
        run_art_mode(console, store)
    else:
        run_solver_mode(console, store, config)

    console.print("[cyan]Goodbye![/cyan]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
