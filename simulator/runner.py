from enum import Enum

from simulator.errors import MachineStuckError
from simulator.history import History

DEFAULT_MAX_ITERATIONS = 1_000


class RunStatus(Enum):
    RUNNING = "running"
    HALTED = "halted"
    STUCK = "stuck"
    LIMIT_REACHED = "limit_reached"
    QUIT = "quit"


class MachineRunner:
    """Drives a TuringMachine step by step and records every transition."""

    def __init__(self, machine, max_iterations=DEFAULT_MAX_ITERATIONS, history=None):
        self.machine = machine
        self.max_iterations = max_iterations
        self.history = history if history is not None else History()
        self.status = RunStatus.RUNNING
        self.error = None

    def is_running(self):
        return self.status is RunStatus.RUNNING

    def step(self):
        try:
            transition = self.machine.next_transition()
        except MachineStuckError as e:
            self.status = RunStatus.STUCK
            self.error = e
            raise

        self.machine.apply_transition(transition)
        self.history.add(transition)
        if transition.is_terminal():
            self.status = RunStatus.HALTED
        elif len(self.history) >= self.max_iterations:
            self.status = RunStatus.LIMIT_REACHED
        return transition

    def run(self):
        """Step until the machine halts, gets stuck or hits `max_iterations`."""
        while self.is_running():
            try:
                self.step()
            except MachineStuckError:
                break
        return self.status

    def quit(self):
        if self.is_running():
            self.status = RunStatus.QUIT
