import pytest

from wingo.core.models import Label
from wingo.core.validation import is_valid_period, parse_history
from wingo.errors import DataShapeError

def test_parse_reverses_to_oldest_first():
    payload = {"data": {"list": [
        {"issueNo": "3", "number": "7"},
        {"issue": "2", "number": 1},
        {"issueNo": "1", "number": 5},
    ]}}
    draws = parse_history(payload)
    assert [d.period for d in draws] == ["1", "2", "3"]
    assert [d.label for d in draws] == [Label.BIG, Label.SMALL, Label.BIG]

def test_period_kept_as_string():
    long_id = "202501011000100012345"
    draws = parse_history({"data": {"list": [{"issueNo": int(long_id), "number": 3}]}})
    assert draws[0].period == long_id

@pytest.mark.parametrize("payload", [
    None,
    {},
    {"data": None},
    {"data": {}},
    {"data": {"list": "nope"}},
    {"data": {"list": [1, 2]}},
])
def test_bad_containers(payload):
    with pytest.raises(DataShapeError):
        parse_history(payload)

@pytest.mark.parametrize("item", [
    {"number": 3},
    {"issueNo": "abc", "number": 3},
    {"issueNo": "5", "number": "x"},
    {"issueNo": "5", "number": -1},
    {"issueNo": "5"},
])
def test_bad_items(item):
    with pytest.raises(DataShapeError):
        parse_history({"data": {"list": [item]}})

def test_number_reads_leading_integer():
    payload = {"data": {"list": [
        {"issueNo": "3", "number": 7.0},
        {"issueNo": "2", "number": "5.0"},
        {"issueNo": "1", "number": " 4"},
    ]}}
    assert [d.number for d in parse_history(payload)] == [4, 5, 7]

def test_valid_period():
    assert is_valid_period("12345678901234567890")
    assert not is_valid_period("12a")
    assert not is_valid_period(None)
