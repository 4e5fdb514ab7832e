import pytest

from kubewait.model.poll import PollSpec


def test_defaults():
    spec = PollSpec(max_elapsed_time=10)
    assert spec.initial_interval == 0.5
    assert spec.multiplier == 1.5
    assert spec.max_interval == 60


@pytest.mark.parametrize(
    ("attempt", "expected"),
    [(1, 1.0), (2, 2.0), (3, 4.0), (4, 5.0), (10, 5.0)],
    ids=["initial", "second", "third", "capped", "stays-capped"],
)
def test_interval(attempt, expected):
    spec = PollSpec(max_elapsed_time=10, initial_interval=1, multiplier=2, max_interval=5)
    assert spec.interval(attempt) == expected


def test_interval_requires_positive_attempt():
    with pytest.raises(ValueError):
        PollSpec(max_elapsed_time=1).interval(0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_elapsed_time": -1},
        {"max_elapsed_time": 1, "initial_interval": 0},
        {"max_elapsed_time": 1, "multiplier": 0.5},
        {"max_elapsed_time": 1, "max_interval": 0},
    ],
)
def test_invalid(kwargs):
    with pytest.raises(ValueError):
        PollSpec(**kwargs)
