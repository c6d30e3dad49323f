from pathlib import Path

import pytest

from simulator.ruleset import Ruleset

MACHINES_DIR = Path(__file__).resolve().parent.parent / "machines"

SMALL_RULESET = """\
|   | 0     | 1     | 2     | 3   |
|---|---    | --- |---    |---  |
| a | a>1   | a<2   | b>3   | a<0 |
| b | _<1   | a>2   | a<3   | a!0 |
"""


@pytest.fixture
def machines_dir():
    return MACHINES_DIR


@pytest.fixture
def mul5_text():
    return (MACHINES_DIR / "mul5_add.md").read_text(encoding="utf-8")


@pytest.fixture
def mul5_ruleset(mul5_text):
    return Ruleset.from_string(mul5_text)


@pytest.fixture
def small_ruleset():
    return Ruleset.from_string(SMALL_RULESET)
