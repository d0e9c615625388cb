from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import vending.tools.run_script as run_script


@pytest.fixture(autouse=True)
def _no_global_observability(monkeypatch) -> None:
    monkeypatch.setattr(run_script, "configure_logging", lambda: None)
    monkeypatch.setattr(run_script, "configure_otel", lambda: None)


def test_demo_run_prints_results(capsys) -> None:
    exit_code = run_script.main([])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Drinks:\nMilk: 0.50лв.\nEspresso: 0.40лв.\nLong Espresso: 0.60лв." in captured.out
    assert "Your change is 0.60лв. in coins of: 1x0.50лв., 1x0.10лв." in captured.out
    assert "error: The drink 'espresso' was not found" in captured.err
    assert "error: There is no change to return" in captured.err


def test_run_with_config_and_script_files(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "machine.json"
    config_path.write_text(
        json.dumps(
            {
                "currency": {"sign": "€", "spacer": " ", "position": "BEFORE"},
                "drinks": {"Tea": 0.35},
            }
        ),
        encoding="utf-8",
    )
    script_path = tmp_path / "script.json"
    script_path.write_text(
        json.dumps(
            {
                "commands": [
                    {"op": "put_coin", "amount": "0.50"},
                    {"op": "buy_drink", "name": "Tea"},
                    {"op": "get_coins"},
                ]
            }
        ),
        encoding="utf-8",
    )

    exit_code = run_script.main(["--config", str(config_path), "--script", str(script_path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "You bought 'Tea' for € 0.35, your balance is € 0.15" in captured.out
    assert "Your change is € 0.15 in coins of: 1x€ 0.10, 1x€ 0.05" in captured.out
    assert captured.err == ""


def test_invalid_config_exits_with_error(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "machine.json"
    config_path.write_text(
        json.dumps(
            {
                "currency": {"sign": "$", "spacer": "", "position": "BEFORE"},
                "drinks": {"Odd": 0.42},
            }
        ),
        encoding="utf-8",
    )

    exit_code = run_script.main(["--config", str(config_path)])

    assert exit_code == 1
    assert "InvalidPriceStepError" in capsys.readouterr().err


def test_missing_file_exits_with_error(tmp_path: Path, capsys) -> None:
    exit_code = run_script.main(["--config", str(tmp_path / "absent.json")])

    assert exit_code == 1
    assert "cannot read input" in capsys.readouterr().err


def test_undecodable_config_exits_with_error(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "machine.json"
    config_path.write_bytes(b"\xff\xfe{}")

    exit_code = run_script.main(["--config", str(config_path)])

    assert exit_code == 1
    assert "cannot read input" in capsys.readouterr().err


def test_out_of_range_coin_in_script_is_reported_not_raised(tmp_path: Path, capsys) -> None:
    script_path = tmp_path / "script.json"
    script_path.write_text(
        json.dumps({"commands": [{"op": "put_coin", "amount": "1e1000000"}, {"op": "view_amount"}]}),
        encoding="utf-8",
    )

    exit_code = run_script.main(["--script", str(script_path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "error: The machine accepts coins of:" in captured.err
    assert "Your balance is 0.00лв." in captured.out
