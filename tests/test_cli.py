import json

import pytest

from protolife.cli import main
from protolife.model import PRESETS


def test_list_presets(capsys):
    assert main(["--list-presets"]) == 0
    out = capsys.readouterr().out
    assert "0: The First Garden" in out
    assert len(out.strip().splitlines()) == len(PRESETS)


def test_summary_counts_full_population(capsys):
    assert main(["--seed", "1"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "particles: 3000"
    total = sum(int(line.split(": ")[1]) for line in lines[1:])
    assert total == 3000


def test_export_after_respawn(capsys):
    assert main(["--seed", "1", "--export"]) == 0
    state = json.loads(capsys.readouterr().out)
    assert state["num_colours"] == 3
    assert state["decay_rate"] == 80.0
    assert state["weights"] == PRESETS[0].model.to_list()


def test_preset_by_name(capsys):
    assert main(["--preset", "heat death", "--export"]) == 0
    state = json.loads(capsys.readouterr().out)
    assert all(w == 0 for w in state["weights"])


def test_preset_by_number(capsys):
    assert main(["--preset", "3", "--export"]) == 0
    state = json.loads(capsys.readouterr().out)
    assert state["weights"] == PRESETS[3].model.to_list()
    assert state["num_colours"] == 6


def test_unknown_preset_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--preset", "no such preset"])
    assert excinfo.value.code == 2


def test_state_round_trip(tmp_path, capsys):
    assert main(["--preset", "Predation", "--export"]) == 0
    exported = capsys.readouterr().out
    path = tmp_path / "state.json"
    path.write_text(exported, encoding="utf-8")
    assert main(["--state", str(path), "--export"]) == 0
    assert json.loads(capsys.readouterr().out) == json.loads(exported)


def test_bad_state_file(tmp_path, capsys):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"weights": "bad"}), encoding="utf-8")
    assert main(["--state", str(path)]) == 1
    assert "failed to load state" in capsys.readouterr().err


def test_running_steps_keeps_population(capsys):
    assert main(["--seed", "2", "--steps", "1", "--dt", "0.1"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "particles: 3000"