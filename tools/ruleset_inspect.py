import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from simulator.errors import RulesetParseError
from simulator.ruleset import Ruleset

console = Console()


def load_ruleset(path):
    """Read and parse a ruleset table file."""
    with open(path, "r", encoding="utf-8") as f:
        return Ruleset.from_string(f.read())


def build_ruleset_table(ruleset, state=None, symbol=None):
    """Transition table as a rich Table, states as columns and symbols as rows.

    The column of `state` and the row of `symbol` are highlighted, their
    intersection (the rule about to fire) stronger.
    """
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("", justify="center", style="bright_cyan")
    for s in ruleset.states:
        table.add_column(str(s), justify="center",
                         header_style="bold on grey37" if s == state else None)

    for sym in ruleset.alphabet:
        row = [Text(sym)]
        for s in ruleset.states:
            rule = ruleset.get(s, sym)
            style = ""
            if s == state and sym == symbol:
                style = "bold white on blue"
            elif s == state or sym == symbol:
                style = "on grey23"
            row.append(Text("" if rule is None else str(rule), style=style))
        table.add_row(*row)
    return table


def pretty_print_ruleset(ruleset, state=None, symbol=None):
    console.print("\n[bold]=== Transition Table ===[/bold]")
    console.print(build_ruleset_table(ruleset, state, symbol))
    console.print(f"States: {len(ruleset.states)}, Symbols: {len(ruleset.alphabet)}, Rules: {len(ruleset)}")

    console.print("\n[bold]=== Markdown Table ===[/bold]")
    console.print(ruleset.to_markdown(), markup=False, highlight=False)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Ruleset Inspector")
    parser.add_argument("rules", help="Path to a ruleset table file")
    parser.add_argument("--state", type=int, help="State column to highlight")
    parser.add_argument("--symbol", help="Symbol row to highlight")
    args = parser.parse_args(argv)

    try:
        ruleset = load_ruleset(Path(args.rules))
    except (OSError, RulesetParseError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    pretty_print_ruleset(ruleset, args.state, args.symbol)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
