from simulator.errors import TapeFormatError

BLANK = "_"


class Tape:
    """Logically infinite tape backed by a buffer covering every visited cell.

    `index` addresses the buffer; the logical head position is
    `index - offset`. Unvisited cells read as the blank symbol.
    """

    def __init__(self, data, head=0, data_start_at=0, blank=BLANK):
        self.blank = blank
        self._frozen = False
        data = list(data)
        # head position relative to the first cell of `data`
        head0 = head - data_start_at

        if head0 == 0:
            self._data = data or [blank]
            self._index = 0
        elif head0 < 0:
            self._data = [blank] * -head0 + data
            self._index = 0
        else:
            self._data = data + [blank] * max(0, head0 + 1 - len(data))
            self._index = head0
        self._offset = self._index - head

    @classmethod
    def from_text(cls, text, blank=BLANK):
        """Build a tape from the two-line tape file format.

        Line 1 holds the tape contents, line 2 the head position relative to
        the first character of line 1.
        """
        lines = text.splitlines()
        if not lines:
            raise TapeFormatError("Tape not found")
        if len(lines) < 2:
            raise TapeFormatError("Start position not found")
        try:
            start = int(lines[1].strip())
        except ValueError:
            raise TapeFormatError(f"Invalid start position: {lines[1]!r}") from None
        return cls(lines[0], start, 0, blank=blank)

    def read(self):
        if 0 <= self._index < len(self._data):
            return self._data[self._index]
        return self.blank

    @property
    def head(self):
        return self._index - self._offset

    @property
    def index(self):
        return self._index

    @property
    def data(self):
        return tuple(self._data)

    def contents(self):
        return "".join(self._data)

    @property
    def frozen(self):
        return self._frozen

    def set_head(self, head):
        self._check_mutable()
        self._index = head + self._offset
        self._extend()

    def apply_rule(self, rule):
        self._check_mutable()
        self._data[self._index] = rule.write
        self._index += rule.move.delta
        self._extend()

    def copy(self):
        """Independent mutable copy."""
        return self._clone(frozen=False)

    def snapshot(self):
        """Independent read-only, hashable copy."""
        return self._clone(frozen=True)

    def _clone(self, frozen):
        tape = Tape.__new__(Tape)
        tape.blank = self.blank
        tape._frozen = frozen
        tape._data = list(self._data)
        tape._index = self._index
        tape._offset = self._offset
        return tape

    def _check_mutable(self):
        if self._frozen:
            raise TypeError("Tape snapshot is read-only")

    def _extend(self):
        if self._index < 0:
            grow = -self._index
            self._data[:0] = [self.blank] * grow
            self._offset += grow
            self._index = 0
        elif self._index >= len(self._data):
            self._data.extend([self.blank] * (self._index - len(self._data) + 1))

    def __eq__(self, other):
        if not isinstance(other, Tape):
            return NotImplemented
        return (self._data, self._index, self._offset) == (other._data, other._index, other._offset)

    def __hash__(self):
        if not self._frozen:
            raise TypeError("unhashable type: mutable Tape, use snapshot()")
        return hash((tuple(self._data), self._index, self._offset))

    def __len__(self):
        return len(self._data)

    def __str__(self):
        return "".join(
            f"[{c}]" if i == self._index else f" {c} "
            for i, c in enumerate(self._data)
        )

    def __repr__(self):
        return f"Tape({self.contents()!r}, head={self.head})"
