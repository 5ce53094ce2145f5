import random
from dataclasses import dataclass
from typing import Optional, Sequence

from loguru import logger

from wingo.analytics.expansion import MICRO_MODELS, ModelSpec, build_micro_models
from wingo.analytics.heuristics import CLASSIFIERS
from wingo.core.models import DrawRecord, Label
from wingo.errors import InsufficientHistoryError

CONF_MIN = 90
CONF_MAX = 99
JITTER = 2

PRIMARY_MODELS: list[ModelSpec] = [
    ModelSpec("exponential_trend", {"lookback": 20, "decay": 0.9}, 18),
    ModelSpec("frequency_distribution", {"lookback": 30}, 15),
    ModelSpec("streak_detection", {}, 22),
    ModelSpec("alternating_pattern", {"lookback": 10}, 16),
    ModelSpec("mirror_logic", {"lookback": 7}, 12),
    ModelSpec("odd_even_correlation", {}, 10),
    ModelSpec("gap_analysis", {"lookback": 15}, 11),
    ModelSpec("sum_modulo_pattern", {"lookback": 5}, 8),
    ModelSpec("prime_influence", {}, 6),
    ModelSpec("fibonacci_resonance", {}, 7),
]


@dataclass
class EnsembleResult:
    prediction: Label
    confidence: int
    votes: dict[Label, int]
    total_models: int


def _clamp(x: int) -> int:
    return max(CONF_MIN, min(CONF_MAX, x))


def _micro_pool(n: int) -> list[ModelSpec]:
    return MICRO_MODELS if n >= 10 else build_micro_models(n)


def cast_votes(draws: Sequence[DrawRecord], specs: Sequence[ModelSpec]) -> dict[Label, int]:
    votes = {Label.BIG: 0, Label.SMALL: 0}
    for spec in specs:
        try:
            label = CLASSIFIERS[spec.kind](draws, **spec.params)
        except Exception as e:
            logger.warning(f"Model {spec.name} failed: {e}")
            continue
        votes[label] += spec.weight
    return votes


def confidence_score(votes: dict[Label, int], rng: random.Random) -> int:
    """Presentation confidence: vote share clamped into [90, 99], jittered by +-2, clamped again."""
    total = votes[Label.BIG] + votes[Label.SMALL]
    # exact half-up of max/total*100 in integers
    raw = (200 * max(votes.values()) + total) // (2 * total)
    conf = _clamp(raw)
    return _clamp(conf + rng.randint(-JITTER, JITTER))


def ensemble_predict(draws: Sequence[DrawRecord], rng: Optional[random.Random] = None) -> EnsembleResult:
    rng = rng or random.Random()
    votes = cast_votes(draws, PRIMARY_MODELS)
    micro = cast_votes(draws, _micro_pool(len(draws)))
    for label in votes:
        votes[label] += micro[label]

    total = votes[Label.BIG] + votes[Label.SMALL]
    if total == 0:
        raise InsufficientHistoryError("No model produced a vote")

    prediction = Label.BIG if votes[Label.BIG] > votes[Label.SMALL] else Label.SMALL
    return EnsembleResult(
        prediction=prediction,
        confidence=confidence_score(votes, rng),
        votes=votes,
        total_models=total,
    )
