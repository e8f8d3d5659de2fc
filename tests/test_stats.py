import pytest

from evomerge.core.fitness import score
from evomerge.core.individual import Individual
from evomerge.core.stats import RunStats, format_report, measure


def test_measure_reduces_scores():
    pop = [Individual(i, x) for i, x in enumerate([12.0, 480.5, 903.25, 77.0])]
    s = measure(pop)
    vals = [score(p.position) for p in pop]
    assert s.min == min(vals)
    assert s.max == max(vals)
    assert s.count == 4
    assert s.mean == pytest.approx(sum(vals) / 4)
    best = max(pop, key=lambda p: p.score)
    assert (s.best.id, s.best.position) == (best.id, best.position)


def test_measure_order_independent():
    pop = [Individual(i, x) for i, x in enumerate([5.0, 50.0, 500.0])]
    a, b = measure(pop), measure(list(reversed(pop)))
    assert (a.min, a.max, a.best.id) == (b.min, b.max, b.best.id)


def test_tie_goes_to_later_individual():
    s = measure([Individual(0, 0.0), Individual(1, 0.0)])
    assert s.best.id == 1


def test_empty_population_rejected():
    with pytest.raises(ValueError):
        measure([])


def test_report_format():
    s = measure([Individual(0, 0.0), Individual(1, 0.0)])
    assert format_report(2, 7, 123, s).splitlines() == [
        "Count: 2, steps: 7",
        "Seed: 123",
        "Results:",
        "  min:  525",
        "  max:  525",
        "  avg:  525",
        "  best: (1, x=0, score=525)",
    ]


def test_mean():
    assert RunStats(1.0, 3.0, 8.0, 4, None).mean == 2.0


def test_report_uses_measured_best_score():
    f = lambda x: -abs(x - 500)
    s = measure([Individual(0, 400.0), Individual(1, 498.0)], f)
    line = format_report(2, 1, 1, s).splitlines()[-1]
    assert line == "  best: (1, x=498, score=-2)"
