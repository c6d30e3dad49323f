class TuringError(Exception):
    """Base class for every error raised by the simulator."""


# === Rule text ===
class RuleParseError(TuringError, ValueError):
    message = "Invalid rule"

    def __init__(self):
        super().__init__(self.message)


class InvalidRuleError(RuleParseError):
    message = "Invalid rule"


class InvalidMoveError(RuleParseError):
    message = "Invalid move"


class InvalidStateError(RuleParseError):
    message = "Invalid state"


# === Ruleset table text ===
class RulesetParseError(TuringError, ValueError):
    pass


class InvalidRulesetError(RulesetParseError):
    def __init__(self):
        super().__init__("Invalid ruleset")


class InvalidHeaderStateError(RulesetParseError):
    def __init__(self, state):
        self.state = state
        super().__init__(f"Invalid state: {state}")


class InvalidSymbolError(RulesetParseError):
    def __init__(self, row):
        self.row = row
        super().__init__(f"Invalid symbol in row {row}")


class DuplicateStateError(RulesetParseError):
    def __init__(self, state):
        self.state = state
        super().__init__(f"Duplicate state: {state}")


class DuplicateSymbolError(RulesetParseError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Duplicate symbol: {symbol}")


class InvalidFormatError(RulesetParseError):
    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"Invalid format in cell [{row}, {col}]")


class InvalidRuleCellError(RulesetParseError):
    def __init__(self, row, col, format):
        self.row = row
        self.col = col
        self.format = format
        super().__init__(f"Invalid rule format in cell [{row}, {col}]: {format}")


# === Lookup ===
class RulesetError(TuringError, LookupError):
    pass


class RuleNotFoundError(RulesetError):
    def __init__(self, state, symbol):
        self.state = state
        self.symbol = symbol
        super().__init__(f'Rule for state "{state}" and symbol "{symbol}" not found')


# === Engine ===
class MachineStuckError(TuringError):
    """No transition is defined for the machine's current configuration."""

    def __init__(self, rule_error: RulesetError):
        self.rule_error = rule_error
        super().__init__(f"Rule not found: {rule_error}")


# === Input files and configuration ===
class TapeFormatError(TuringError, ValueError):
    pass


class ConfigError(TuringError, ValueError):
    pass
