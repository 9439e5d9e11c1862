from pathlib import Path

import pytest

from simulator.alphabet import Alphabet
from simulator.transition import Transition
from simulator.turing_machine import TuringMachine

MACHINES_DIR = Path(__file__).resolve().parent.parent / "machines"


@pytest.fixture
def machines_dir():
    return MACHINES_DIR


@pytest.fixture
def copy_machine():
    machine = TuringMachine(
        states={"q0", "q1"},
        input_alphabet=Alphabet(["0", "1"]),
        tape_alphabet=Alphabet(["0", "1", "."]),
        initial_state="q0",
        blank_symbol=".",
        final_states={"q1"},
    )
    machine.add_transition(Transition("q0", ["1"], "q1", ["1"], ["S"]))
    machine.add_transition(Transition("q0", ["0"], "q1", ["0"], ["S"]))
    return machine


@pytest.fixture
def looping_machine():
    machine = TuringMachine(
        states={"q0"},
        input_alphabet=Alphabet(["0"]),
        tape_alphabet=Alphabet(["0", "."]),
        initial_state="q0",
        blank_symbol=".",
        final_states=set(),
    )
    machine.add_transition(Transition("q0", ["."], "q0", ["."], ["S"]))
    return machine


@pytest.fixture
def increment_machine():
    machine = TuringMachine(
        states={"q0", "q1", "qf"},
        input_alphabet=Alphabet(["0", "1"]),
        tape_alphabet=Alphabet(["0", "1", "."]),
        initial_state="q0",
        blank_symbol=".",
        final_states={"qf"},
    )
    for line in [
        "q0 0 q0 0 R",
        "q0 1 q0 1 R",
        "q0 . q1 . L",
        "q1 1 q1 0 L",
        "q1 0 qf 1 S",
        "q1 . qf 1 S",
    ]:
        machine.add_transition(Transition.parse(line))
    return machine
