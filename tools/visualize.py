import queue
import sys
import threading
import time

import readchar
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from simulator.errors import MachineStuckError
from tools.ruleset_inspect import build_ruleset_table

console = Console()

QUIT_KEYS = ("q", readchar.key.ESC, readchar.key.CTRL_C)


def build_tape_table(tape, window=12):
    """Cells within `window` of the head: logical positions above, symbols below."""
    data = tape.data
    first = max(0, tape.index - window)
    last = min(len(data), tape.index + window + 1)

    table = Table(show_header=False, show_edge=False, box=None, padding=(0, 1))
    for _ in range(first, last):
        table.add_column(justify="center", min_width=3)

    positions = []
    symbols = []
    for i in range(first, last):
        style = "black on cyan" if i == tape.index else ""
        positions.append(Text(str(i - tape.index + tape.head), style=f"dim {style}".strip()))
        symbols.append(Text(data[i], style=style))
    table.add_row(*positions)
    table.add_row(*symbols)
    return table


def build_history_view(history, capacity, window=12):
    """Transitions visible at the history's scroll position, oldest first."""
    start, records = history.window(capacity)
    items = []
    for i, transition in enumerate(records):
        grid = Table.grid(expand=True)
        grid.add_column(ratio=1)
        grid.add_column(justify="right", width=8)
        grid.add_row(build_tape_table(transition.tape, window), Text(str(transition.rule)))
        items.append(Panel(grid, title=Text(f"Step {start + i + 1}", style="italic"), title_align="left"))
    if not items:
        items.append(Text("No steps yet", style="dim"))
    return Group(*items)


class KeyReader:
    """Reads keys on a daemon thread so the render loop can poll without blocking."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin
        self._keys = queue.Queue()
        self._thread = None

    def start(self):
        if self._thread is None and self.stream.isatty():
            self._thread = threading.Thread(target=self._read, daemon=True)
            self._thread.start()

    def _read(self):
        while True:
            try:
                self._keys.put(readchar.readkey())
            except KeyboardInterrupt:
                self._keys.put(readchar.key.CTRL_C)

    def poll(self, timeout):
        """Next key pressed within `timeout` seconds, or None."""
        try:
            return self._keys.get(timeout=timeout)
        except queue.Empty:
            return None


class Visualizer:
    """Live terminal view of a MachineRunner: tape, rules and history.

    Keys: `q`/Esc quit, Up/Down scroll the history.
    """

    def __init__(self, runner, frame_timeout_ms=250, speed=4, tape_window=12, history_height=5,
                 console=console, keys=None):
        self.runner = runner
        self.frame_timeout = frame_timeout_ms / 1000
        self.step_interval = self.frame_timeout * speed
        self.tape_window = tape_window
        self.history_height = history_height
        self.console = console
        self.keys = keys if keys is not None else KeyReader()

    def render(self):
        machine = self.runner.machine
        tape = machine.tape

        layout = Layout()
        layout.split_row(Layout(name="left", ratio=1), Layout(name="history", ratio=1))
        layout["left"].split_column(Layout(name="tape", size=5), Layout(name="rules"))

        status = self.runner.status.value
        layout["tape"].update(Panel(
            build_tape_table(tape, self.tape_window),
            title="Tape",
            subtitle=f"state {machine.state} | {status}",
        ))
        layout["rules"].update(Panel(
            build_ruleset_table(machine.ruleset, machine.state, tape.read()),
            title="Rules",
        ))

        capacity = max(1, (self.console.size.height - 2) // self.history_height)
        history = self.runner.history
        layout["history"].update(Panel(
            build_history_view(history, capacity, self.tape_window // 2),
            title="History" if history.follow else "History (scrolled)",
        ))
        return layout

    def handle_key(self, key):
        history = self.runner.history
        if key in QUIT_KEYS:
            self.runner.quit()
        elif key == readchar.key.UP:
            history.scroll_up()
        elif key == readchar.key.DOWN:
            history.scroll_down()

    def update(self):
        """Step the machine once its step interval has elapsed."""
        if time.monotonic() - self._step_last < self.step_interval:
            return
        self._step_last = time.monotonic()
        self.runner.step()

    def run(self):
        """Step the machine at a fixed pace until it stops or the user quits."""
        self.keys.start()
        self._step_last = time.monotonic()
        with Live(self.render(), console=self.console, screen=True, auto_refresh=False) as live:
            try:
                while self.runner.is_running():
                    try:
                        self.update()
                    except MachineStuckError:
                        # reported through runner.status / runner.error
                        live.update(self.render(), refresh=True)
                        break
                    key = self.keys.poll(self.frame_timeout)
                    if key is not None:
                        self.handle_key(key)
                    live.update(self.render(), refresh=True)
            except KeyboardInterrupt:
                self.runner.quit()
        return self.runner.status
