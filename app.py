# app.py

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt, IntPrompt, Confirm
from rich.table import Table

from config.config_loader import load_config
from logger.logger import JSONLogger
from simulator.turing_machine import InvalidInputError
from tools.definition_parser import (
    DefinitionParseError,
    parse_input_strings,
    parse_machine_definition,
    print_machine,
)

console = Console()

STATUS_COLORS = {
    "ACCEPTED": "green",
    "REJECTED": "red",
    "TIMEOUT": "yellow",
    "INVALID": "magenta",
}

# === Simulation ===
def simulate_inputs(machine, inputs, max_steps, trace=False, logger=None):
    """Run every input on the machine. Returns one result dict per input."""
    results = []
    for input_string in inputs:
        try:
            machine.run(input_string, max_steps=max_steps, visualize=trace)
            entry = machine.result(input_string).to_dict()
        except InvalidInputError as e:
            entry = {
                "input_string": input_string,
                "status": "INVALID",
                "error": str(e),
            }
        if logger is not None:
            logger.log_run(entry)
        results.append(entry)
    return results

def show_results(results, blank_symbol, show_heads=False, machine=None):
    table = Table(title="Simulation Results", show_header=True, header_style="bold magenta")
    table.add_column("Input")
    table.add_column("Result", justify="center")
    table.add_column("Final State", justify="center")
    table.add_column("Steps", justify="right")
    table.add_column("Tape")

    for entry in results:
        status = entry["status"]
        color = STATUS_COLORS.get(status, "white")
        shown_input = entry["input_string"] or blank_symbol
        if status == "INVALID":
            table.add_row(escape(shown_input), f"[{color}]{status}[/{color}]", "-", "-",
                          escape(entry["error"]))
            continue
        table.add_row(
            escape(shown_input),
            f"[{color}]{status}[/{color}]",
            escape(entry["final_state"]),
            f"{entry['steps']:,}",
            escape(entry["result"]),
        )

    console.print(table)

    if show_heads and machine is not None:
        # Only the last run is still on the tapes
        for idx, content in enumerate(machine.get_tapes_content_with_head(), start=1):
            console.print(f"Tape {idx}: {content}", markup=False)

def run_files(definition_path, inputs_path, config):
    try:
        machine = parse_machine_definition(definition_path)
        inputs = parse_input_strings(inputs_path)
    except (DefinitionParseError, FileNotFoundError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    if config["trace"]:
        print_machine(machine)

    logger = None
    if config["log_results"]:
        logger = JSONLogger(config["output_directory"], config["log_file_prefix"],
                            machine_name=Path(definition_path).stem)

    console.print(f"[cyan]Running {len(inputs):,} input(s) with max {config['max_steps']:,} steps...[/cyan]")
    results = simulate_inputs(machine, inputs, config["max_steps"], trace=config["trace"], logger=logger)
    show_results(results, machine.blank_symbol, show_heads=config["show_heads"], machine=machine)

    if logger is not None:
        console.print(f"[green]Results logged to {logger.current_log}[/green]")
    return 0

# === Interactive Mode ===
def interactive_main(config):
    console.print("\n[bold cyan]Multi-tape Turing Machine Simulator[/bold cyan]")

    definition_path = Prompt.ask("Machine definition file")
    inputs_path = Prompt.ask("Input strings file")
    while True:
        max_steps = IntPrompt.ask("Max Steps", default=config["max_steps"])
        if max_steps >= 1:
            break
        console.print("[red]Max Steps must be at least 1.[/red]")
    config["max_steps"] = max_steps
    config["trace"] = Confirm.ask("Trace every step?", default=config["trace"])
    config["log_results"] = Confirm.ask("Log results?", default=config["log_results"])

    return run_files(definition_path, inputs_path, config)

# === CLI Mode ===
def build_parser():
    parser = argparse.ArgumentParser(description="Multi-tape Turing Machine Simulator")
    parser.add_argument("definition", nargs="?", help="Machine definition file")
    parser.add_argument("inputs", nargs="?", help="File with one input string per line")
    parser.add_argument("--config", help="Path to a JSON runtime config")
    parser.add_argument("--max-steps", type=int, help="Step budget per input")
    parser.add_argument("--trace", action="store_true", help="Print every configuration")
    parser.add_argument("--heads", action="store_true", help="Show tapes with head markers after the last run")
    parser.add_argument("--log", action="store_true", help="Append results to JSON lines logs")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, verbose=args.trace)
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    if args.max_steps is not None:
        if args.max_steps < 1:
            console.print("[red]Error: --max-steps must be at least 1[/red]")
            return 1
        config["max_steps"] = args.max_steps
    if args.trace:
        config["trace"] = True
    if args.heads:
        config["show_heads"] = True
    if args.log:
        config["log_results"] = True

    if args.definition and args.inputs:
        return run_files(args.definition, args.inputs, config)
    if args.definition or args.inputs:
        console.print("[red]Both a definition file and an inputs file are required.[/red]")
        return 1
    return interactive_main(config)

if __name__ == "__main__":
    sys.exit(main())
