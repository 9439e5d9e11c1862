class Alphabet:
    """A set of single-character symbols (Sigma or Gamma)."""

    def __init__(self, tokens=()):
        # Only the first character of each token is taken as the symbol.
        self._symbols = set()
        for token in tokens:
            if token:
                self._symbols.add(token[0])

    @classmethod
    def from_symbols(cls, symbols):
        alphabet = cls()
        alphabet._symbols = set(symbols)
        return alphabet

    def add_symbol(self, symbol):
        self._symbols.add(symbol)

    def contains(self, symbol):
        return symbol in self._symbols

    @property
    def symbols(self):
        return frozenset(self._symbols)

    def size(self):
        return len(self._symbols)

    def is_empty(self):
        return not self._symbols

    def __contains__(self, symbol):
        return self.contains(symbol)

    def __len__(self):
        return self.size()

    def __iter__(self):
        return iter(sorted(self._symbols))

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __str__(self):
        return "{" + ", ".join(sorted(self._symbols)) + "}"

    def __repr__(self):
        return f"Alphabet({str(self)})"
