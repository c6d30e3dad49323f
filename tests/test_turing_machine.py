import pytest

from simulator.errors import MachineStuckError, RuleNotFoundError
from simulator.rule import Move, Rule
from simulator.ruleset import Ruleset
from simulator.tape import Tape
from simulator.turing_machine import TuringMachine


def test_multiply_by_five_and_add(mul5_ruleset):
    # computes 5x+y for a tape holding "x+y"
    machine = TuringMachine(Tape("123+19", 2, 0), 0, mul5_ruleset)
    limit = 1000
    while limit > 0:
        transition = machine.next_transition()
        machine.apply_transition(transition)
        if transition.rule.move.is_terminal():
            break
        limit -= 1
    assert machine.tape.contents() == "_634____"
    assert limit == 1000 - 170


def test_next_transition_does_not_mutate(small_ruleset):
    machine = TuringMachine(Tape("ab", 0, 0), 0, small_ruleset)
    first = machine.next_transition()
    second = machine.next_transition()
    assert first == second
    assert machine.state == 0
    assert machine.tape.contents() == "ab"
    assert machine.tape.head == 0


def test_transition_snapshots_tape(small_ruleset):
    machine = TuringMachine(Tape("ab", 0, 0), 0, small_ruleset)
    transition = machine.next_transition()
    assert transition.state == 0
    assert transition.rule == Rule("a", Move.RIGHT, 1)
    assert transition.tape is not machine.tape

    machine.apply_transition(transition)
    assert machine.state == 1
    assert machine.tape.head == 1
    assert transition.tape.head == 0
    assert transition.tape.contents() == "ab"


def test_transition_is_read_only_and_hashable(small_ruleset):
    machine = TuringMachine(Tape("ab", 0, 0), 0, small_ruleset)
    transition = machine.next_transition()
    assert transition.tape.frozen
    with pytest.raises(TypeError):
        transition.tape.set_head(5)
    with pytest.raises(TypeError):
        transition.tape.apply_rule(transition.rule)
    assert transition.tape.head == 0

    assert hash(transition) == hash(machine.next_transition())
    assert len({transition, machine.next_transition()}) == 1


def test_apply_transition_moves_and_extends(small_ruleset):
    machine = TuringMachine(Tape("b", 0, 0), 0, small_ruleset)
    machine.apply_transition(machine.next_transition())
    assert machine.state == 1
    assert machine.tape.head == -1
    assert machine.tape.contents() == "__"


def test_stuck_machine_is_unchanged():
    ruleset = Ruleset.from_string("|   | 0   |\n| a | a>0 |\n")
    machine = TuringMachine(Tape("ab", 1, 0), 0, ruleset)
    with pytest.raises(MachineStuckError) as exc:
        machine.next_transition()
    assert isinstance(exc.value.rule_error, RuleNotFoundError)
    assert exc.value.rule_error.state == 0
    assert exc.value.rule_error.symbol == "b"
    assert isinstance(exc.value.__cause__, RuleNotFoundError)
    assert str(exc.value) == 'Rule not found: Rule for state "0" and symbol "b" not found'
    assert machine.state == 0
    assert machine.tape.contents() == "ab"
    assert machine.tape.head == 1


def test_unknown_state_is_a_runtime_error(small_ruleset):
    machine = TuringMachine(Tape("a", 0, 0), 42, small_ruleset)
    assert machine.state == 42
    with pytest.raises(MachineStuckError):
        machine.next_transition()


def test_stop_rule_does_not_move():
    ruleset = Ruleset.from_string("|   | 3   |\n| a | z!9 |\n")
    machine = TuringMachine(Tape("a", 0, 0), 3, ruleset)
    transition = machine.next_transition()
    assert transition.is_terminal()
    machine.apply_transition(transition)
    assert machine.state == 9
    assert machine.tape.head == 0
    assert machine.tape.read() == "z"


def test_machines_share_a_ruleset(small_ruleset):
    first = TuringMachine(Tape("a", 0, 0), 0, small_ruleset)
    second = TuringMachine(Tape("b", 0, 0), 0, small_ruleset)
    first.apply_transition(first.next_transition())
    assert second.next_transition().rule == Rule("_", Move.LEFT, 1)
    assert second.ruleset is first.ruleset
