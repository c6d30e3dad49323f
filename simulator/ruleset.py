from simulator.errors import (
    DuplicateStateError,
    DuplicateSymbolError,
    InvalidFormatError,
    InvalidHeaderStateError,
    InvalidRuleCellError,
    InvalidRulesetError,
    InvalidSymbolError,
    RuleNotFoundError,
    RuleParseError,
)
from simulator.rule import Rule

UNBOUND_CELL = "   "


def _split_cells(line):
    return line.rstrip().rstrip("|").split("|")


def _is_separator(line):
    return ":-" in line or "--" in line


def _parse_state(text):
    if not (text.isascii() and text.isdigit()):
        raise InvalidHeaderStateError(text)
    return int(text)


class Ruleset:
    """Transition table: state -> symbol -> Rule, plus display ordering.

    Parsed from and rendered to a Markdown pipe table. States are the columns,
    alphabet symbols are the rows:

        |   | 0   | 1   | 2   | 3   |
        |:-:|:-:  |:-:  |:-:  |:-:  |
        | a | a>1 | a<2 | b>3 | a<0 |
        | b | _<1 | a>2 | a<3 | a!0 |
    """

    def __init__(self, rules, alphabet, states):
        self._rules = {state: dict(row) for state, row in rules.items()}
        self._alphabet = tuple(alphabet)
        self._states = tuple(states)

    @property
    def states(self):
        return self._states

    @property
    def alphabet(self):
        return self._alphabet

    def find(self, state, symbol) -> Rule:
        rule = self._rules.get(state, {}).get(symbol)
        if rule is None:
            raise RuleNotFoundError(state, symbol)
        return rule

    def get(self, state, symbol):
        """Like `find` but returns None for an unbound pair."""
        return self._rules.get(state, {}).get(symbol)

    def __len__(self):
        return sum(len(row) for row in self._rules.values())

    def __eq__(self, other):
        if not isinstance(other, Ruleset):
            return NotImplemented
        return (self._rules, self._alphabet, self._states) == (
            other._rules, other._alphabet, other._states)

    @classmethod
    def from_string(cls, text):
        lines = text.splitlines()
        while lines and not lines[0].strip():
            lines.pop(0)
        if not lines:
            raise InvalidRulesetError()

        rules = {}
        states = []
        for cell in _split_cells(lines[0])[2:]:
            state = _parse_state(cell.strip())
            if state in rules:
                raise DuplicateStateError(state)
            rules[state] = {}
            states.append(state)

        alphabet = []
        for row, line in enumerate(lines[1:]):
            if row == 0 and _is_separator(line):
                continue

            cells = _split_cells(line)[1:len(states) + 2]
            if not cells:
                raise InvalidFormatError(row, 0)
            symbol = cells[0].strip()
            if len(symbol) != 1:
                raise InvalidSymbolError(row)
            if symbol in alphabet:
                raise DuplicateSymbolError(symbol)
            alphabet.append(symbol)

            rule_cells = cells[1:]
            if len(rule_cells) < len(states):
                raise InvalidFormatError(row, len(rule_cells))
            for col, (state, cell) in enumerate(zip(states, rule_cells)):
                rule_text = cell.strip()
                if not rule_text:
                    continue
                try:
                    rules[state][symbol] = Rule.from_string(rule_text)
                except RuleParseError:
                    raise InvalidRuleCellError(row, col, cell) from None

        return cls(rules, alphabet, states)

    def to_markdown(self):
        lines = [
            "|   |" + "".join(f" {state} |" for state in self._states),
            "|:-:|" + ":-:|" * len(self._states),
        ]
        for symbol in self._alphabet:
            cells = []
            for state in self._states:
                rule = self.get(state, symbol)
                cells.append(UNBOUND_CELL if rule is None else str(rule))
            lines.append(f"| {symbol} |" + "".join(f" {cell} |" for cell in cells))
        return "\n".join(lines) + "\n"

    def __str__(self):
        return self.to_markdown()

    def __repr__(self):
        return f"Ruleset(states={list(self._states)}, alphabet={list(self._alphabet)})"
