from collections import deque

from simulator.transition import Movement

DEFAULT_BLANK = "."


class Tape:
    """
    One tape of the machine, unbounded in both directions.
    Cells live in a deque that grows by a single blank cell whenever the
    head crosses either boundary, so the head always indexes a real cell.
    """

    def __init__(self, input_string="", blank_symbol=DEFAULT_BLANK):
        self.blank_symbol = blank_symbol
        self.cells = deque()
        self.head = 0
        self.reset(input_string)

    def read(self):
        return self.cells[self.head]

    def write(self, symbol):
        # The machine validates symbols against Gamma before writing.
        self.cells[self.head] = symbol

    def move_left(self):
        if self.head == 0:
            self._expand_left()
        self.head -= 1

    def move_right(self):
        self.head += 1
        if self.head >= len(self.cells):
            self._expand_right()

    def move_stay(self):
        pass

    def move(self, movement):
        if movement is Movement.LEFT:
            self.move_left()
        elif movement is Movement.RIGHT:
            self.move_right()
        else:
            self.move_stay()

    @property
    def head_position(self):
        return self.head

    def get_content(self):
        """All cells left to right, including blanks added by growth."""
        return "".join(self.cells)

    def get_content_with_head(self):
        """Tape content with the head cell bracketed, e.g. ``ab[c]de``."""
        parts = []
        for pos, symbol in enumerate(self.cells):
            if pos == self.head:
                parts.append(f"[{symbol}]")
            else:
                parts.append(symbol)
        return "".join(parts)

    def reset(self, input_string=""):
        self.cells.clear()
        self.head = 0
        if input_string:
            self.cells.extend(input_string)
        else:
            self.cells.append(self.blank_symbol)

    def _expand_left(self):
        self.cells.appendleft(self.blank_symbol)
        self.head += 1

    def _expand_right(self):
        self.cells.append(self.blank_symbol)

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return f"Tape({self.get_content_with_head()!r}, blank={self.blank_symbol!r})"
