import json
import os
from datetime import datetime, timezone


def transition_entry(transition, step):
    """Flatten a transition into a JSON-serializable step record."""
    tape = transition.tape
    rule = transition.rule
    return {
        "step": step,
        "state": transition.state,
        "head": tape.head,
        "read": tape.read(),
        "write": rule.write,
        "move": str(rule.move),
        "next_state": rule.next_state,
        "tape": tape.contents(),
    }


def utc_today():
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="turing_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = utc_today()
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        """Log a single entry to the main step log."""
        self._rotate_if_stale()
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_batch(self, entries: list):
        """Log a batch of entries to the main step log."""
        self._rotate_if_stale()
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def rotate(self):
        """Start a new main log file for the current UTC date."""
        self.today = utc_today()
        self.current_log = self._get_log_filename()

    def _rotate_if_stale(self):
        # long runs may cross midnight UTC
        if self.today != utc_today():
            self.rotate()

    def log_transition(self, transition, step):
        self.log(transition_entry(transition, step))

    def log_history(self, history):
        """Write every stored transition at once, numbered from 1 like the live listener."""
        self.log_batch([transition_entry(t, step) for step, t in enumerate(history, start=1)])

    def log_summary(self, entry: dict):
        """Log the outcome of a run (status, steps, final tape)."""
        entry = dict(entry, timestamp=datetime.now(timezone.utc).isoformat())
        self._log_to_file(f"summary_{self.today}.jsonl", [entry])

    def step_listener(self):
        """History listener writing one record per transition."""
        def listener(transition, count):
            self.log_transition(transition, count)
        return listener
