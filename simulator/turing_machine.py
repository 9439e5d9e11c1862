from dataclasses import asdict, dataclass, field
from typing import List

from rich.console import Console

from simulator.alphabet import Alphabet
from simulator.tape import DEFAULT_BLANK, Tape

DEFAULT_MAX_STEPS = 10_000

console = Console()


class MachineDefinitionError(ValueError):
    """The formal definition M = (Q, Sigma, Gamma, s, b, F, delta) is malformed."""


class InvalidInputError(ValueError):
    """An input string contains a symbol outside the input alphabet."""


@dataclass
class RunResult:
    input_string: str
    halted: bool
    accepted: bool
    final_state: str
    steps: int
    tapes: List[str] = field(default_factory=list)
    result: str = ""

    @property
    def status(self):
        if not self.halted:
            return "TIMEOUT"
        return "ACCEPTED" if self.accepted else "REJECTED"

    def to_dict(self):
        entry = asdict(self)
        entry["status"] = self.status
        return entry


class TuringMachine:
    """
    Deterministic multi-tape Turing machine.

    Each step reads one symbol from every tape, looks up the first matching
    transition and applies its writes and movements to all tapes before the
    step completes. The machine halts when no transition applies.
    """

    def __init__(self, states, input_alphabet, tape_alphabet, initial_state,
                 blank_symbol=DEFAULT_BLANK, final_states=(), num_tapes=1):
        self.states = set(states)
        self.input_alphabet = _as_alphabet(input_alphabet)
        self.tape_alphabet = _as_alphabet(tape_alphabet)
        self.initial_state = initial_state
        self.blank_symbol = blank_symbol
        self.final_states = set(final_states)
        self.num_tapes = num_tapes
        self.transitions = []

        if not self.states:
            raise MachineDefinitionError("The set of states Q cannot be empty")
        if self.initial_state not in self.states:
            raise MachineDefinitionError(f"Initial state '{initial_state}' is not in Q")
        unknown = sorted(self.final_states - self.states)
        if unknown:
            raise MachineDefinitionError(f"Final states {unknown} are not in Q")
        if not self.tape_alphabet.contains(self.blank_symbol):
            raise MachineDefinitionError(
                f"Blank symbol '{blank_symbol}' is not in the tape alphabet {self.tape_alphabet}"
            )
        if not isinstance(num_tapes, int) or num_tapes < 1:
            raise MachineDefinitionError(f"A machine needs at least one tape, got {num_tapes}")

        self.tapes = [Tape(blank_symbol=self.blank_symbol) for _ in range(self.num_tapes)]
        self.current_state = self.initial_state
        self.step_count = 0
        self.halted = False

    def add_transition(self, transition):
        if transition.current_state not in self.states:
            raise MachineDefinitionError(
                f"Transition {transition}: state '{transition.current_state}' is not in Q"
            )
        if transition.next_state not in self.states:
            raise MachineDefinitionError(
                f"Transition {transition}: next state '{transition.next_state}' is not in Q"
            )
        if transition.num_tapes != self.num_tapes:
            raise MachineDefinitionError(
                f"Transition {transition} covers {transition.num_tapes} tape(s), "
                f"machine has {self.num_tapes}"
            )
        for symbol in transition.read_symbols:
            if not self.tape_alphabet.contains(symbol):
                raise MachineDefinitionError(
                    f"Transition {transition}: read symbol '{symbol}' is not in the tape alphabet"
                )
        for symbol in transition.write_symbols:
            if not self.tape_alphabet.contains(symbol):
                raise MachineDefinitionError(
                    f"Transition {transition}: write symbol '{symbol}' is not in the tape alphabet"
                )
        if self.input_alphabet.contains(self.blank_symbol):
            raise MachineDefinitionError(
                f"Blank symbol '{self.blank_symbol}' cannot belong to the input alphabet"
            )

        self.transitions.append(transition)

    def add_transitions(self, transitions):
        for transition in transitions:
            self.add_transition(transition)

    def run(self, input_string, max_steps=DEFAULT_MAX_STEPS, visualize=False):
        """
        Run the machine on ``input_string``.

        Returns True once no transition applies (the machine halted, check
        ``is_accepted`` for the verdict) and False when ``max_steps`` steps
        were executed without halting.
        """
        for symbol in input_string:
            if not self.input_alphabet.contains(symbol):
                raise InvalidInputError(
                    f"Input '{input_string}' contains '{symbol}', which is not in {self.input_alphabet}"
                )

        self._initialize_tapes(input_string)
        self.current_state = self.initial_state
        self.step_count = 0
        self.halted = False

        if visualize:
            self.visualize()
        while not self.halted and self.step_count < max_steps:
            transition = self.step()
            if transition is None:
                self.halted = True
            elif visualize:
                self.visualize(transition)

        return self.halted

    def step(self):
        """
        Apply one transition. Returns the transition applied, or None when
        nothing matches, in which case no tape is touched.
        """
        symbols = self.read_current_symbols()
        transition = self.find_transition(self.current_state, symbols)
        if transition is None:
            return None

        self.current_state = transition.next_state
        for tape, symbol, movement in zip(self.tapes, transition.write_symbols, transition.movements):
            tape.write(symbol)
            tape.move(movement)
        self.step_count += 1
        return transition

    def find_transition(self, state, symbols):
        # First match wins; determinism is up to whoever builds the table.
        for transition in self.transitions:
            if transition.matches(state, symbols):
                return transition
        return None

    def read_current_symbols(self):
        return tuple(tape.read() for tape in self.tapes)

    def is_accepted(self):
        return self.current_state in self.final_states

    def get_current_state(self):
        return self.current_state

    def get_step_count(self):
        return self.step_count

    def get_tapes_content(self):
        return [tape.get_content() for tape in self.tapes]

    def get_tapes_content_with_head(self):
        return [tape.get_content_with_head() for tape in self.tapes]

    def get_result_from_first_tape(self):
        """First tape without leading/trailing blanks; a lone blank if it is all blank."""
        content = self.tapes[0].get_content().strip(self.blank_symbol)
        return content or self.blank_symbol

    def reset(self):
        self.current_state = self.initial_state
        self.step_count = 0
        self.halted = False
        for tape in self.tapes:
            tape.reset("")

    def result(self, input_string=""):
        return RunResult(
            input_string=input_string,
            halted=self.halted,
            accepted=self.is_accepted(),
            final_state=self.current_state,
            steps=self.step_count,
            tapes=self.get_tapes_content(),
            result=self.get_result_from_first_tape(),
        )

    def describe(self):
        return {
            "states": sorted(self.states),
            "input_alphabet": str(self.input_alphabet),
            "tape_alphabet": str(self.tape_alphabet),
            "initial_state": self.initial_state,
            "blank_symbol": self.blank_symbol,
            "final_states": sorted(self.final_states),
            "num_tapes": self.num_tapes,
            "transitions": len(self.transitions),
        }

    def visualize(self, transition=None):
        """Print the current configuration, with the transition that produced it."""
        console.rule(f"[bold]Step {self.step_count}[/bold]")
        console.print(f"State: [cyan]{self.current_state}[/cyan]")
        for idx, content in enumerate(self.get_tapes_content_with_head(), start=1):
            console.print(f"Tape {idx}: {content}", markup=False)
        if transition is None:
            console.print("[dim]Initial configuration[/dim]")
        else:
            console.print(f"Applied: {transition}", markup=False)

    def _initialize_tapes(self, input_string):
        for idx, tape in enumerate(self.tapes):
            tape.reset(input_string if idx == 0 else "")


def _as_alphabet(symbols):
    if isinstance(symbols, Alphabet):
        # Own copy; the caller may keep adding symbols to theirs
        return Alphabet.from_symbols(symbols.symbols)
    return Alphabet(symbols)
