from typing import NamedTuple

from simulator.rule import Rule
from simulator.tape import Tape


class Transition(NamedTuple):
    """Snapshot of one step: the state and read-only tape before it and the rule it applies."""

    state: int
    tape: Tape
    rule: Rule

    def is_terminal(self) -> bool:
        return self.rule.move.is_terminal()
