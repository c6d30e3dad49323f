from simulator.errors import MachineStuckError, RulesetError
from simulator.ruleset import Ruleset
from simulator.tape import Tape
from simulator.transition import Transition


class TuringMachine:
    """Tape, current state and ruleset.

    Stepping is split in two: `next_transition` only inspects the machine,
    `apply_transition` mutates it. Callers drive the loop themselves.
    """

    def __init__(self, tape: Tape, state: int, ruleset: Ruleset):
        self._tape = tape
        self._state = state
        self._ruleset = ruleset

    @property
    def tape(self) -> Tape:
        return self._tape

    @property
    def state(self) -> int:
        return self._state

    @property
    def ruleset(self) -> Ruleset:
        return self._ruleset

    def next_transition(self) -> Transition:
        symbol = self._tape.read()
        try:
            rule = self._ruleset.find(self._state, symbol)
        except RulesetError as e:
            raise MachineStuckError(e) from e
        return Transition(self._state, self._tape.snapshot(), rule)

    def apply_transition(self, transition: Transition):
        # Only valid for a transition computed from the current configuration.
        self._state = transition.rule.next_state
        self._tape.apply_rule(transition.rule)
