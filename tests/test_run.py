from typing import Any

import pytest

from intervalmap import IntervalMap, Run, int_domain


def make_map() -> IntervalMap[int, str]:
    m: IntervalMap[int, str] = IntervalMap("a", domain=int_domain(8))
    m.assign(10, 20, "b")
    m.assign(50, 60, "c")
    return m


def spans(runs: Any) -> list[tuple[Any, Any, Any]]:
    return [(run.start, run.end, run.value) for run in runs]


def test_run_rejects_empty_range() -> None:
    with pytest.raises(ValueError, match="must be <"):
        Run(start=5, end=5, value="a")


def test_run_covers() -> None:
    run = Run(start=5, end=10, value="a")
    last = Run(start=5, end=None, value="a")

    assert run.covers(5)
    assert run.covers(9)
    assert not run.covers(10)
    assert not run.covers(4)
    assert last.covers(1_000_000)


def test_runs_cover_whole_map() -> None:
    m = make_map()

    assert spans(m.runs()) == [
        (-128, 10, "a"),
        (10, 20, "b"),
        (20, 50, "a"),
        (50, 60, "c"),
        (60, None, "a"),
    ]


def test_runs_are_clipped() -> None:
    m = make_map()

    assert spans(m.runs(15, 55)) == [(15, 20, "b"), (20, 50, "a"), (50, 55, "c")]


def test_runs_within_single_run() -> None:
    m = make_map()

    assert spans(m[12:18]) == [(12, 18, "b")]


def test_runs_open_bounds() -> None:
    m = make_map()

    assert spans(m[:15]) == [(-128, 10, "a"), (10, 15, "b")]
    assert spans(m[55:]) == [(55, 60, "c"), (60, None, "a")]


def test_runs_stop_on_boundary() -> None:
    m = make_map()

    assert spans(m[0:10]) == [(0, 10, "a")]
    assert spans(m[10:20]) == [(10, 20, "b")]


def test_runs_empty_range() -> None:
    m = make_map()

    assert list(m[30:30]) == []
    assert list(m[40:30]) == []


def test_runs_reject_out_of_domain_bounds() -> None:
    m = make_map()

    with pytest.raises(ValueError, match="start"):
        m.runs(-500, 0)
    with pytest.raises(ValueError, match="stop"):
        m.runs(0, 500)


def test_runs_agree_with_lookup() -> None:
    m = make_map()

    for run in m.runs(-20, 100):
        stop = 100 if run.end is None else run.end
        for key in range(run.start, stop):
            assert m[key] == run.value
