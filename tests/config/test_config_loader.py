import pytest
import yaml

from pagelenz.config.config_loader import ConfigLoader, setup_logging
from pagelenz.dataloader.impl.ArrayDataLoader import ArrayLoader
from pagelenz.dataloader.impl.TraceFileLoader import TraceFileLoader
from pagelenz.workload.generators import eighty_twenty_workload


def write_config(tmp_path, config):
    path = tmp_path / "config.yml"
    path.write_text(yaml.safe_dump(config))
    return path


def test_load_defaults(tmp_path):
    loader = ConfigLoader(write_config(tmp_path, {"capacity": 8}))
    config = loader.load()
    assert config["capacity"] == 8
    assert loader.get_policies() == ["fifo", "optimal", "random", "lru", "clock"]
    assert loader.get_capacities() == [8]
    assert loader.get_seed() is None
    assert loader.get_log_level() == "INFO"
    assert loader.get_output_format() == "console"


def test_capacity_sweep_and_generated_workload(tmp_path):
    loader = ConfigLoader(
        write_config(
            tmp_path,
            {
                "policies": ["LRU", "belady"],
                "capacities": [2, 4],
                "seed": 5,
                "workload": {"type": "80-20", "length": 300},
            },
        )
    )
    loader.load()
    assert loader.get_capacities() == [2, 4]
    dataloader = loader.get_dataloader()
    assert isinstance(dataloader, ArrayLoader)
    assert dataloader.load() == eighty_twenty_workload(length=300, seed=5)


def test_input_trace(tmp_path):
    trace = tmp_path / "trace.txt"
    trace.write_text("1 2 1\n")
    loader = ConfigLoader(
        write_config(tmp_path, {"capacity": 1, "input_trace": str(trace)})
    )
    loader.load()
    dataloader = loader.get_dataloader()
    assert isinstance(dataloader, TraceFileLoader)
    assert dataloader.load() == [1, 2, 1]


@pytest.mark.parametrize(
    "config, message",
    [
        ({"policies": ["mru"], "capacity": 2}, "Unknown policy"),
        ({"policies": ["lru"]}, "capacity"),
        ({"capacity": -3}, "non-negative"),
        ({"capacity": "big"}, "Invalid capacity"),
        ({"capacity": 2, "workload": {"type": "zipf"}}, "Unknown workload"),
        ({"capacity": 2, "workload": "looping"}, "mapping"),
        ({"capacity": 2, "log_level": "verbose"}, "Invalid log_level"),
        ({"capacity": 2, "log_level": 10}, "Invalid log_level"),
        ({"capacity": 2, "output_format": "html"}, "Invalid output_format"),
        ({"capacities": None}, "must not be empty"),
        ({"capacities": []}, "at least one"),
        ({"capacity": 2, "policies": None}, "non-empty list"),
    ],
)
def test_invalid_config(tmp_path, config, message):
    loader = ConfigLoader(write_config(tmp_path, config))
    with pytest.raises(ValueError, match=message):
        loader.load()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader(tmp_path / "nope.yml").load()


def test_sample_configs_are_valid():
    from pathlib import Path

    import pagelenz

    configs = Path(pagelenz.__file__).parent / "config" / "configs"
    samples = sorted(configs.glob("*.yml"))
    assert samples
    for sample in samples:
        ConfigLoader(sample).load()


def test_scalar_capacities(tmp_path):
    loader = ConfigLoader(write_config(tmp_path, {"capacities": 5, "policies": "lru"}))
    loader.load()
    assert loader.get_capacities() == [5]
    assert loader.get_policies() == ["lru"]


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Invalid log_level"):
        setup_logging({"log_level": "verbose"})
