import pytest

from pagelenz.dataloader.impl.ArrayDataLoader import ArrayLoader
from pagelenz.dataloader.impl.TraceFileLoader import TraceFileLoader


def test_array_loader_returns_data():
    data = [1, 2, 3, 4]
    loader = ArrayLoader(data)
    load = loader.load()
    for i in range(len(data)):
        assert load[i] == data[i]
        assert loader[i] == data[i]
    assert len(loader) == 4
    assert list(loader) == data


def test_trace_file_loader(tmp_path):
    trace = tmp_path / "trace.txt"
    trace.write_text("1 2, 3\n# whole line comment\n\n0x10 4  # trailing\n")
    loader = TraceFileLoader(trace)
    assert loader.load() == [1, 2, 3, 16, 4]
    assert len(loader) == 5


def test_trace_file_bad_token(tmp_path):
    trace = tmp_path / "trace.txt"
    trace.write_text("1 2\n3 page\n")
    with pytest.raises(ValueError, match=":2: invalid page id 'page'"):
        TraceFileLoader(trace).load()


def test_trace_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        TraceFileLoader(tmp_path / "absent.txt").load()
