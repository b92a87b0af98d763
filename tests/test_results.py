# File: tests/test_results.py
from concurrent.futures import ThreadPoolExecutor

from link_scout.crawler.results import ResultMap


def test_last_write_wins():
    results = ResultMap()
    results.record("example.com", "Home")
    results.record("example.com", "About")
    assert results.snapshot() == [("example.com", "About")]
    assert len(results) == 1


def test_snapshot_sorted_by_label():
    results = ResultMap()
    results.record("zeta.org", "Alpha")
    results.record("alpha.org", "Zeta")
    results.record("mid.org", "Middle")
    assert results.snapshot() == [
        ("zeta.org", "Alpha"),
        ("mid.org", "Middle"),
        ("alpha.org", "Zeta"),
    ]


def test_equal_labels_ordered_by_host():
    results = ResultMap()
    results.record("b.org", "Same")
    results.record("a.org", "Same")
    assert [host for host, _ in results.snapshot()] == ["a.org", "b.org"]


def test_snapshot_is_stable_under_resorting():
    results = ResultMap()
    for i in range(20):
        results.record(f"host{i}.org", f"label {i % 7}")
    snapshot = results.snapshot()
    assert sorted(snapshot, key=lambda item: (item[1], item[0])) == snapshot
    assert results.snapshot() == snapshot


def test_empty_snapshot():
    assert ResultMap().snapshot() == []


def test_concurrent_records():
    results = ResultMap()

    def record(i):
        results.record(f"host{i % 10}.org", "label")

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(record, range(500)))

    assert len(results) == 10
