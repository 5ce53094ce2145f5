import random

import pytest

from conftest import FixedRng, draws_from
from wingo.analytics import heuristics
from wingo.analytics.ensemble import PRIMARY_MODELS, confidence_score, ensemble_predict
from wingo.core.models import Label
from wingo.errors import InsufficientHistoryError

def test_primary_weights():
    assert sum(s.weight for s in PRIMARY_MODELS) == 125
    assert len(PRIMARY_MODELS) == 10

def test_votes_sum_to_total(history):
    res = ensemble_predict(history, rng=FixedRng())
    assert res.votes[Label.BIG] + res.votes[Label.SMALL] == res.total_models
    assert res.total_models == 125 + 93
    assert res.prediction == (Label.BIG if res.votes[Label.BIG] > res.votes[Label.SMALL] else Label.SMALL)

def test_confidence_always_in_range(history):
    for seed in range(50):
        res = ensemble_predict(history[seed % 20:], rng=random.Random(seed))
        assert 90 <= res.confidence <= 99

def test_confidence_clamps_lopsided_votes():
    votes = {Label.BIG: 218, Label.SMALL: 0}
    assert confidence_score(votes, FixedRng(2)) == 99
    assert confidence_score(votes, FixedRng(0)) == 99
    assert confidence_score(votes, FixedRng(-2)) == 97

def test_confidence_floor():
    votes = {Label.BIG: 109, Label.SMALL: 109}
    assert confidence_score(votes, FixedRng(-2)) == 90
    assert confidence_score(votes, FixedRng(2)) == 92

def test_prediction_ignores_jitter(history):
    a = ensemble_predict(history, rng=FixedRng(-2))
    b = ensemble_predict(history, rng=FixedRng(2))
    assert a.prediction == b.prediction and a.votes == b.votes

def test_failing_model_is_skipped(history, monkeypatch):
    def boom(draws):
        raise RuntimeError("broken")
    monkeypatch.setitem(heuristics.CLASSIFIERS, "prime_influence", boom)
    res = ensemble_predict(history, rng=FixedRng())
    assert res.total_models == 218 - 6

def test_short_history_still_votes():
    res = ensemble_predict(draws_from([5, 1, 7]), rng=FixedRng())
    assert res.total_models == 125 + 86

def test_no_history():
    with pytest.raises(InsufficientHistoryError):
        ensemble_predict([], rng=FixedRng())

def test_tie_goes_to_small(monkeypatch):
    from wingo.analytics import ensemble
    from wingo.analytics.expansion import ModelSpec
    # last draw 7: prime says BIG, a run of one says reverse (SMALL)
    monkeypatch.setattr(ensemble, "PRIMARY_MODELS", [
        ModelSpec("prime_influence", {}, 1),
        ModelSpec("streak_detection", {}, 1),
    ])
    monkeypatch.setattr(ensemble, "_micro_pool", lambda n: [])
    res = ensemble_predict(draws_from([0, 1, 7]), rng=FixedRng())
    assert res.votes == {Label.BIG: 1, Label.SMALL: 1}
    assert res.prediction == Label.SMALL

def test_confidence_rounds_half_up():
    # 181/200 = 90.5%
    assert confidence_score({Label.BIG: 181, Label.SMALL: 19}, FixedRng(0)) == 91
    assert confidence_score({Label.BIG: 19, Label.SMALL: 181}, FixedRng(0)) == 91
