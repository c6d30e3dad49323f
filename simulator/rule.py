from enum import Enum
from typing import NamedTuple

from simulator.errors import InvalidMoveError, InvalidRuleError, InvalidStateError


class Move(Enum):
    RIGHT = ">"
    LEFT = "<"
    STOP = "!"

    @property
    def delta(self) -> int:
        if self is Move.RIGHT:
            return 1
        if self is Move.LEFT:
            return -1
        return 0

    def is_terminal(self) -> bool:
        """A STOP rule does not move the head and halts the machine."""
        return self is Move.STOP

    def __str__(self):
        return self.value


class Rule(NamedTuple):
    """One cell of the transition table: what to write, where to go, which state is next."""

    write: str
    move: Move
    next_state: int

    @staticmethod
    def from_string(text: str) -> "Rule":
        """Parse `<symbol><marker><state>`, e.g. `a>1`, `_<10`, `+!0`.

        The symbol position is taken literally, so ` <0` writes a space.
        """
        if not text:
            raise InvalidRuleError()
        write = text[0]
        if len(text) < 2:
            raise InvalidMoveError()
        try:
            move = Move(text[1])
        except ValueError:
            raise InvalidRuleError() from None
        state_text = text[2:]
        if not (state_text.isascii() and state_text.isdigit()):
            raise InvalidStateError()
        return Rule(write, move, int(state_text))

    def __str__(self):
        return f"{self.write}{self.move}{self.next_state}"
