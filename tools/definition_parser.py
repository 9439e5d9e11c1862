# tools/definition_parser.py

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simulator.alphabet import Alphabet
from simulator.transition import Transition
from simulator.turing_machine import TuringMachine

console = Console()

COMMENT_PREFIX = "#"
EMPTY_SET_MARKER = "-"


class DefinitionParseError(ValueError):
    """A machine definition file could not be turned into a machine."""


# === Line Helpers ===
def is_comment_or_empty(line):
    return not line or line.startswith(COMMENT_PREFIX)

def meaningful_lines(text):
    """Yield stripped lines, skipping blanks and comments."""
    for line in text.splitlines():
        line = line.strip()
        if not is_comment_or_empty(line):
            yield line

def next_line(lines, what):
    try:
        return next(lines)
    except StopIteration:
        raise DefinitionParseError(f"Unexpected end of file while reading {what}") from None

def tokenize_set(line):
    tokens = line.split()
    if tokens == [EMPTY_SET_MARKER]:
        return []
    return tokens


# === Definition Reader ===
def parse_machine_text(text, source="<string>"):
    """
    Build a TuringMachine from a definition in this layout:

        1. Q         states, whitespace separated
        2. Sigma     input alphabet
        3. Gamma     tape alphabet
        4. s         initial state
        5. b         blank symbol
        6. F         final states ("-" for none)
        7. n         number of tapes (optional, defaults to 1)
        8. delta     one transition per line: q a1..an q' w1..wn m1..mn
    """
    try:
        lines = meaningful_lines(text)

        states = tokenize_set(next_line(lines, "the set of states"))
        if not states:
            raise DefinitionParseError("The set of states cannot be empty")

        sigma_tokens = tokenize_set(next_line(lines, "the input alphabet"))
        if not sigma_tokens:
            raise DefinitionParseError("The input alphabet cannot be empty")

        gamma_tokens = tokenize_set(next_line(lines, "the tape alphabet"))
        if not gamma_tokens:
            raise DefinitionParseError("The tape alphabet cannot be empty")

        initial_state = next_line(lines, "the initial state")
        blank_symbol = next_line(lines, "the blank symbol")[0]
        final_states = tokenize_set(next_line(lines, "the final states"))

        transition_lines = list(lines)
        num_tapes = 1
        if transition_lines and len(transition_lines[0].split()) == 1:
            count = transition_lines.pop(0)
            try:
                num_tapes = int(count)
            except ValueError:
                raise DefinitionParseError(f"Invalid number of tapes: '{count}'") from None
            if num_tapes < 1:
                raise DefinitionParseError("The number of tapes must be >= 1")

        machine = TuringMachine(
            states=states,
            input_alphabet=Alphabet(sigma_tokens),
            tape_alphabet=Alphabet(gamma_tokens),
            initial_state=initial_state,
            blank_symbol=blank_symbol,
            final_states=final_states,
            num_tapes=num_tapes,
        )
        for line in transition_lines:
            machine.add_transition(Transition.parse(line, num_tapes))

        return machine

    except ValueError as e:
        raise DefinitionParseError(f"Error parsing {source}: {e}") from e

def read_text(path, what):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{what} not found at: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise DefinitionParseError(f"{what} {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise DefinitionParseError(f"Cannot read {what.lower()} {path}: {e.strerror or e}") from e

def parse_machine_definition(path):
    text = read_text(path, "Machine definition")
    return parse_machine_text(text, source=str(path))


# === Input Reader ===
def parse_input_strings(path):
    """Read input strings, one per line. Empty lines are the empty input."""
    return read_text(path, "Input file").splitlines()


# === Pretty Printing ===
def print_machine(machine):
    info = machine.describe()
    console.print("\n[bold cyan]Machine Definition[/bold cyan]")
    console.print(f"  States: {', '.join(info['states'])}")
    console.print(f"  Input alphabet: {info['input_alphabet']}", markup=False)
    console.print(f"  Tape alphabet: {info['tape_alphabet']}", markup=False)
    console.print(f"  Initial state: {info['initial_state']}")
    console.print(f"  Blank symbol: {info['blank_symbol']}", markup=False)
    console.print(f"  Final states: {', '.join(info['final_states']) or '(none)'}")
    console.print(f"  Tapes: {info['num_tapes']}")

    table = Table(title="Transitions", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Transition")
    for idx, transition in enumerate(machine.transitions):
        table.add_row(str(idx), escape(str(transition)))
    console.print(table)


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Turing Machine Definition Inspector")
    parser.add_argument("definition", help="Path to the machine definition file")
    args = parser.parse_args()

    machine = parse_machine_definition(args.definition)
    print_machine(machine)

if __name__ == "__main__":
    main()
