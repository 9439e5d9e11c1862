import json

import app


def test_run_files_reports_every_input(machines_dir, capsys):
    status = app.main([
        str(machines_dir / "copy_two_tapes.tm"),
        str(machines_dir / "copy_two_tapes.in"),
    ])
    out = capsys.readouterr().out
    assert status == 0
    assert "ACCEPTED" in out
    assert "bba" in out


def test_invalid_input_is_reported_and_others_still_run(machines_dir, tmp_path):
    from tools.definition_parser import parse_machine_definition

    machine = parse_machine_definition(machines_dir / "binary_increment.tm")
    results = app.simulate_inputs(machine, ["1", "12", "11"], max_steps=100)
    assert [r["status"] for r in results] == ["ACCEPTED", "INVALID", "ACCEPTED"]
    assert results[2]["result"] == "100"


def test_timeout_status(tmp_path):
    from tools.definition_parser import parse_machine_text

    machine = parse_machine_text("q0\n0\n0 .\nq0\n.\n-\nq0 . q0 . S\n")
    results = app.simulate_inputs(machine, [""], max_steps=5)
    assert results[0]["status"] == "TIMEOUT"
    assert results[0]["steps"] == 5


def test_bad_definition_exits_with_error(tmp_path, capsys):
    definition = tmp_path / "bad.tm"
    definition.write_text("q0\n", encoding="utf-8")
    inputs = tmp_path / "inputs.txt"
    inputs.write_text("0\n", encoding="utf-8")

    assert app.main([str(definition), str(inputs)]) == 1
    assert "Error" in capsys.readouterr().out


def test_missing_inputs_argument(machines_dir):
    assert app.main([str(machines_dir / "binary_increment.tm")]) == 1


def test_log_flag_writes_results(machines_dir, tmp_path):
    config_path = tmp_path / "runtime_config.json"
    config_path.write_text(json.dumps({"output_directory": str(tmp_path / "logs")}), encoding="utf-8")

    status = app.main([
        str(machines_dir / "binary_increment.tm"),
        str(machines_dir / "binary_increment.in"),
        "--config", str(config_path),
        "--log",
        "--max-steps", "500",
    ])
    assert status == 0

    logs = sorted((tmp_path / "logs").glob("tm_runs_*.jsonl"))
    assert len(logs) == 1
    with open(logs[0], "r", encoding="utf-8") as f:
        entries = [json.loads(line) for line in f]
    assert [e["result"] for e in entries] == ["1", "10", "100", "1100"]
    assert all(e["status"] == "ACCEPTED" for e in entries)


def test_non_utf8_definition_exits_with_error(machines_dir, tmp_path, capsys):
    definition = tmp_path / "latin.tm"
    definition.write_bytes(b"q0\n\xff\xfe\n")

    assert app.main([str(definition), str(machines_dir / "binary_increment.in")]) == 1
    assert "Error" in capsys.readouterr().out


def test_directory_arguments_exit_with_error(machines_dir, tmp_path):
    assert app.main([str(tmp_path), str(machines_dir / "binary_increment.in")]) == 1
    assert app.main([str(machines_dir / "binary_increment.tm"), str(tmp_path)]) == 1


def test_trace_prints_config_summary(machines_dir, capsys):
    status = app.main([
        str(machines_dir / "copy_first_symbol.tm"),
        str(machines_dir / "binary_increment.in"),
        "--trace",
    ])
    out = capsys.readouterr().out
    assert status == 0
    assert "Loaded config:" in out
    assert "Initial configuration" in out


def test_interactive_mode_asks_again_for_bad_max_steps(machines_dir, monkeypatch):
    paths = iter([
        str(machines_dir / "binary_increment.tm"),
        str(machines_dir / "binary_increment.in"),
    ])
    budgets = iter([0, -3, 50])
    monkeypatch.setattr(app.Prompt, "ask", lambda *args, **kwargs: next(paths))
    monkeypatch.setattr(app.IntPrompt, "ask", lambda *args, **kwargs: next(budgets))
    monkeypatch.setattr(app.Confirm, "ask", lambda *args, **kwargs: False)

    config = app.load_config()
    assert app.interactive_main(config) == 0
    assert config["max_steps"] == 50
    assert next(budgets, None) is None
