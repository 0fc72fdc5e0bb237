import logging

from pagelenz.analyzer.analyzer import Analyzer, PolicyResult, format_results
from pagelenz.dataloader.impl.ArrayDataLoader import ArrayLoader
from pagelenz.replacementpolicy.impl.lru import LruReplacementPolicy

REFERENCE = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]


def test_analyzer_counts_hits_per_policy():
    analyzer = Analyzer(["fifo", "optimal", "lru"], ArrayLoader(REFERENCE), 3)
    results = analyzer.run()
    by_policy = {r.policy: r for r in results}
    assert by_policy["fifo"].hits == 5
    assert by_policy["optimal"].hits == 11
    assert by_policy["lru"].hits == 8
    assert by_policy["lru"].misses == 12
    assert by_policy["optimal"].hit_ratio == 11 / 20


def test_analyzer_sweeps_capacities():
    workload = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
    results = Analyzer(["fifo"], ArrayLoader(workload), [3, 4]).run()
    assert [(r.capacity, r.hits) for r in results] == [(3, 3), (4, 2)]


def test_analyzer_accepts_policy_mapping(caplog):
    caplog.set_level(logging.INFO, logger="pagelenz.analysis")
    analyzer = Analyzer({"my-lru": LruReplacementPolicy()}, ArrayLoader([1, 1]), 1)
    results = analyzer.run()
    assert results == [PolicyResult("my-lru", 1, 2, 1)]
    assert "my-lru" in caplog.text


def test_empty_workload_ratio():
    result = Analyzer(["clock"], ArrayLoader([]), 2).run()[0]
    assert result.hits == 0
    assert result.hit_ratio == 0.0


def test_format_results():
    table = format_results([PolicyResult("optimal", 3, 20, 11)])
    lines = table.splitlines()
    assert lines[0].split() == ["policy", "capacity", "accesses", "hits", "misses", "ratio"]
    assert lines[2].split() == ["optimal", "3", "20", "11", "9", "0.550"]
