# app.py

import argparse
import sys
from pathlib import Path

from rich.console import Console

from config.config_loader import load_config
from logger.logger import JSONLogger
from logger.report import write_history
from simulator.errors import ConfigError, RulesetParseError, TapeFormatError
from simulator.runner import MachineRunner, RunStatus
from simulator.ruleset import Ruleset
from simulator.tape import Tape
from simulator.turing_machine import TuringMachine
from tools.ruleset_inspect import pretty_print_ruleset
from tools.simulate import report_outcome, run_summary, simulate_machine
from tools.visualize import Visualizer

console = Console(stderr=True)


# === Utilities ===
def read_text(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_machine(tape_path, rules_path, initial_state=0):
    tape = Tape.from_text(read_text(tape_path))
    ruleset = Ruleset.from_string(read_text(rules_path))
    return TuringMachine(tape, initial_state, ruleset)


def open_output(out):
    if out is None:
        return sys.stdout
    Path(out).parent.mkdir(parents=True, exist_ok=True)
    return open(out, "w", encoding="utf-8")


def exit_code(status):
    return 1 if status is RunStatus.STUCK else 0


# === Modes ===
def run_interactive(machine, stream, config, json_logger=None):
    runner = MachineRunner(machine, max_iterations=config["max_iterations"])
    visualizer = Visualizer(
        runner,
        frame_timeout_ms=config["frame_timeout_ms"],
        speed=config["speed"],
        tape_window=config["tape_window"],
        history_height=config["history_height"],
    )
    visualizer.run()

    write_history(runner.history, stream)
    if json_logger is not None:
        json_logger.log_history(runner.history)
        json_logger.log_summary(run_summary(runner))
    report_outcome(runner)
    return runner


def run_non_interactive(machine, stream, config, json_logger=None):
    return simulate_machine(
        machine,
        stream,
        max_iterations=config["max_iterations"],
        json_logger=json_logger,
        show_progress=stream is not sys.stdout,
    )


def build_parser():
    parser = argparse.ArgumentParser(description="Turing machine simulator for Markdown rule tables")
    parser.add_argument("-t", "--tape", required=True, help="Tape file: contents on line 1, head position on line 2")
    parser.add_argument("-r", "--rules", required=True, help="Ruleset file (Markdown pipe table)")
    parser.add_argument("-o", "--out", help="Write the step report to this file instead of stdout")
    parser.add_argument("--no-interactive", action="store_true", help="Run without the terminal visualizer")
    parser.add_argument("--config", help="Runtime configuration JSON file")
    parser.add_argument("--max-iterations", type=int, help="Stop after this many steps")
    parser.add_argument("--state", type=int, help="Initial state")
    parser.add_argument("--json-log", action="store_true", default=None, help="Also write JSON-lines step logs")
    parser.add_argument("--inspect", action="store_true", help="Print the ruleset and exit")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, overrides={
            "max_iterations": args.max_iterations,
            "initial_state": args.state,
            "json_log": args.json_log,
        })
        machine = load_machine(args.tape, args.rules, config["initial_state"])
    except (OSError, ConfigError, TapeFormatError, RulesetParseError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if args.inspect:
        pretty_print_ruleset(machine.ruleset, machine.state, machine.tape.read())
        return 0

    json_logger = None
    try:
        if config["json_log"]:
            json_logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
        stream = open_output(args.out)
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    try:
        if args.no_interactive:
            runner = run_non_interactive(machine, stream, config, json_logger)
        else:
            runner = run_interactive(machine, stream, config, json_logger)
    finally:
        if stream is not sys.stdout:
            stream.close()

    return exit_code(runner.status)


if __name__ == "__main__":
    sys.exit(main())
