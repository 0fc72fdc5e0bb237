import pytest
import yaml

import run


def test_run_prints_results_table(tmp_path, capsys):
    config = tmp_path / "config.yml"
    config.write_text(
        yaml.safe_dump(
            {
                "policies": ["fifo", "optimal"],
                "capacity": 3,
                "workload": {"type": "looping", "loop_length": 4, "repeats": 2},
                "log_level": "WARNING",
            }
        )
    )
    run.main(["--config", str(config)])
    out = capsys.readouterr().out
    rows = {line.split()[0]: line.split() for line in out.splitlines()[2:]}
    # Scan of 4 pages through 3 frames: FIFO always misses, OPT misses once on the replay
    assert rows["fifo"][3] == "0"
    assert rows["optimal"][3] == "3"


def test_run_bad_config_exits(tmp_path, capsys):
    config = tmp_path / "config.yml"
    config.write_text(yaml.safe_dump({"capacity": -1}))
    with pytest.raises(SystemExit) as exc:
        run.main(["--config", str(config)])
    assert exc.value.code == 1
    assert "Configuration Error" in capsys.readouterr().err


def test_list_policies(capsys):
    run.main(["--list-policies"])
    out = capsys.readouterr().out
    for name in ("fifo", "optimal", "random", "lru", "clock"):
        assert name in out


def test_run_unknown_log_level_exits(tmp_path, capsys):
    config = tmp_path / "config.yml"
    config.write_text(yaml.safe_dump({"capacity": 2, "log_level": "verbose"}))
    with pytest.raises(SystemExit) as exc:
        run.main(["--config", str(config)])
    assert exc.value.code == 1
    assert "Invalid log_level" in capsys.readouterr().err
