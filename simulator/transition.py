from enum import Enum


class Movement(Enum):
    LEFT = "L"
    RIGHT = "R"
    STAY = "S"

    @classmethod
    def from_char(cls, char):
        """Decode a movement tag, case-insensitively (L, R or S)."""
        try:
            return cls(char.upper())
        except (ValueError, AttributeError):
            raise ValueError(f"Invalid movement: {char!r}") from None

    def to_char(self):
        return self.value


class Transition:
    """
    One rule of a multi-tape machine:

        delta(q, [s1, ..., sn]) = (q', [w1, ..., wn], [m1, ..., mn])

    Writes and movements are applied to every tape in the same step.
    """

    def __init__(self, current_state, read_symbols, next_state, write_symbols, movements):
        self.current_state = current_state
        self.read_symbols = tuple(read_symbols)
        self.next_state = next_state
        self.write_symbols = tuple(write_symbols)
        self.movements = tuple(
            m if isinstance(m, Movement) else Movement.from_char(m) for m in movements
        )

        if not (len(self.read_symbols) == len(self.write_symbols) == len(self.movements)):
            raise ValueError(
                "Read symbols, write symbols and movements must have the same length "
                f"(got {len(self.read_symbols)}, {len(self.write_symbols)}, {len(self.movements)})"
            )
        if not self.read_symbols:
            raise ValueError("A transition must cover at least one tape")

    @property
    def num_tapes(self):
        return len(self.read_symbols)

    def matches(self, state, symbols):
        if state != self.current_state:
            return False
        symbols = tuple(symbols)
        if len(symbols) != len(self.read_symbols):
            return False
        return symbols == self.read_symbols

    @classmethod
    def parse(cls, line, num_tapes=1):
        """
        Parse ``q0 a b q1 x y R L`` (an optional ``->`` may separate the
        read and write halves) into a transition over ``num_tapes`` tapes.
        """
        tokens = [tok for tok in line.split() if tok != "->"]
        expected = 2 + 3 * num_tapes
        if len(tokens) != expected:
            raise ValueError(
                f"Transition '{line.strip()}' has {len(tokens)} fields, expected {expected} "
                f"for {num_tapes} tape(s)"
            )

        current_state = tokens[0]
        read_symbols = [tok[0] for tok in tokens[1:1 + num_tapes]]
        next_state = tokens[1 + num_tapes]
        write_start = 2 + num_tapes
        write_symbols = [tok[0] for tok in tokens[write_start:write_start + num_tapes]]
        movements = [Movement.from_char(tok) for tok in tokens[write_start + num_tapes:]]

        return cls(current_state, read_symbols, next_state, write_symbols, movements)

    def __eq__(self, other):
        if not isinstance(other, Transition):
            return NotImplemented
        return (
            self.current_state == other.current_state
            and self.read_symbols == other.read_symbols
            and self.next_state == other.next_state
            and self.write_symbols == other.write_symbols
            and self.movements == other.movements
        )

    def __hash__(self):
        return hash((self.current_state, self.read_symbols, self.next_state,
                     self.write_symbols, self.movements))

    def __str__(self):
        reads = " ".join(self.read_symbols)
        writes = " ".join(self.write_symbols)
        moves = " ".join(m.to_char() for m in self.movements)
        return f"{self.current_state} {reads} -> {self.next_state} {writes} {moves}"

    def __repr__(self):
        return f"Transition({str(self)!r})"
