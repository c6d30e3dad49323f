# tools/simulate.py

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from logger.report import ReportWriter
from simulator.runner import MachineRunner, RunStatus

console = Console(stderr=True)


def console_message(msg):
    console.print(msg)


def run_summary(runner):
    machine = runner.machine
    entry = {
        "status": runner.status.value,
        "steps": len(runner.history),
        "state": machine.state,
        "head": machine.tape.head,
        "tape": machine.tape.contents(),
    }
    if runner.error is not None:
        entry["error"] = str(runner.error)
    return entry


def report_outcome(runner):
    status = runner.status
    steps = len(runner.history)
    if status is RunStatus.HALTED:
        console_message(f"[green]Machine halted after {steps:,} steps.[/green]")
    elif status is RunStatus.STUCK:
        console_message(f"[red]Machine stuck after {steps:,} steps: {runner.error}[/red]")
    elif status is RunStatus.LIMIT_REACHED:
        console_message(f"[yellow]Iteration limit reached after {steps:,} steps.[/yellow]")
    else:
        console_message(f"[yellow]Stopped after {steps:,} steps.[/yellow]")


def simulate_machine(machine, stream, max_iterations=1_000, json_logger=None, show_progress=False):
    """Run a machine to completion, streaming one report record per step to `stream`."""
    runner = MachineRunner(machine, max_iterations=max_iterations)
    runner.history.add_listener(ReportWriter(stream))
    if json_logger is not None:
        runner.history.add_listener(json_logger.step_listener())

    if show_progress:
        with Progress(
                SpinnerColumn(),
                BarColumn(),
                TextColumn("{task.completed}/{task.total} steps"),
                TimeElapsedColumn(),
                console=console,
        ) as progress:
            task = progress.add_task("[cyan]Simulating...", total=max_iterations)
            runner.history.add_listener(lambda transition, count: progress.update(task, completed=count))
            runner.run()
    else:
        runner.run()

    if json_logger is not None:
        json_logger.log_summary(run_summary(runner))
    report_outcome(runner)
    return runner
