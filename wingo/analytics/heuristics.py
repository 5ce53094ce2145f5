import math
from typing import Callable, Sequence

from wingo.core.models import DrawRecord, Label, opposite
from wingo.errors import InsufficientHistoryError

Draws = Sequence[DrawRecord]

PRIMES = {2, 3, 5, 7}
FIBS = {0, 1, 2, 3, 5, 8}

def _window(draws: Draws, lookback: int) -> Draws:
    # take the last N, or everything if fewer exist
    if not draws:
        raise InsufficientHistoryError("No draws to classify")
    return draws[-lookback:] if lookback > 0 else draws[:]

def _last(draws: Draws) -> DrawRecord:
    if not draws:
        raise InsufficientHistoryError("No draws to classify")
    return draws[-1]

# ---------- primary heuristics ----------

def exponential_trend(draws: Draws, lookback: int = 20, decay: float = 0.9) -> Label:
    recent = _window(draws, lookback)
    big = small = 0.0
    for i, d in enumerate(recent):
        w = decay ** (lookback - i - 1)
        if d.label == Label.BIG:
            big += w
        else:
            small += w
    # counter-trend
    return Label.SMALL if big > small else Label.BIG

def frequency_distribution(draws: Draws, lookback: int = 30) -> Label:
    recent = _window(draws, lookback)
    big = sum(1 for d in recent if d.label == Label.BIG)
    small = len(recent) - big
    if small == 0:
        ratio = math.inf if big else math.nan
    else:
        ratio = big / small
    if ratio > 1.3:
        return Label.SMALL
    if ratio < 0.7:
        return Label.BIG
    return Label.SMALL if big > small else Label.BIG

def streak_detection(draws: Draws) -> Label:
    cur = _last(draws).label
    n = len(draws)
    k = 1
    for i in range(n - 2, max(n - 11, -1), -1):
        if draws[i].label == cur:
            k += 1
        else:
            break
    if k >= 3 or k == 1:
        return opposite(cur)
    return cur

def alternating_pattern(draws: Draws, lookback: int = 10) -> Label:
    recent = _window(draws, lookback)
    last = draws[-1].label
    pairs = len(recent) - 1
    flips = sum(1 for i in range(1, len(recent)) if recent[i].label != recent[i-1].label)
    rate = flips / pairs if pairs else 0.0
    if rate > 0.65:
        return opposite(last)
    if rate < 0.35:
        return last
    return opposite(last)

def mirror_logic(draws: Draws, lookback: int = 7) -> Label:
    s = sum(d.digit for d in _window(draws, lookback))
    mirror = (10 - s % 10) % 10
    return Label.BIG if mirror >= 5 else Label.SMALL

def odd_even_correlation(draws: Draws) -> Label:
    last = _last(draws)
    return opposite(last.label) if last.digit % 2 == 0 else last.label

def gap_analysis(draws: Draws, lookback: int = 15) -> Label:
    recent = _window(draws, lookback)
    last = draws[-1].label
    gaps = [abs(recent[i].digit - recent[i-1].digit) for i in range(1, len(recent))]
    if not gaps:
        return opposite(last)
    avg = sum(gaps) / len(gaps)
    if avg > 4.5:
        return opposite(last)
    if avg < 2.5:
        return last
    return opposite(last)

def sum_modulo_pattern(draws: Draws, lookback: int = 5) -> Label:
    m = sum(d.digit for d in _window(draws, lookback)) % 3
    if m == 0:
        return Label.BIG
    if m == 1:
        return Label.SMALL
    return draws[-1].label

def prime_influence(draws: Draws) -> Label:
    return Label.BIG if _last(draws).digit in PRIMES else Label.SMALL

def fibonacci_resonance(draws: Draws) -> Label:
    last = _last(draws)
    return last.label if last.digit in FIBS else opposite(last.label)

# ---------- micro-model kinds ----------

def weighted_sum(draws: Draws, lookback: int, exponent: float) -> Label:
    recent = _window(draws, lookback)
    total = sum(d.digit * (pos + 1) ** exponent for pos, d in enumerate(recent))
    return Label.BIG if math.floor(total) % 2 == 0 else Label.SMALL

def position_offset(draws: Draws, offset: int) -> Label:
    idx = len(draws) - 1 - offset
    if idx < 0:
        raise InsufficientHistoryError(f"No draw at offset {offset}")
    return Label.BIG if (draws[idx].digit + offset) % 10 >= 5 else Label.SMALL

def xor_window(draws: Draws, size: int) -> Label:
    x = 0
    for d in _window(draws, size):
        x ^= d.digit
    return Label.BIG if x >= 5 else Label.SMALL

def rolling_average(draws: Draws, window: int) -> Label:
    recent = _window(draws, window)
    avg = sum(d.digit for d in recent) / len(recent)
    # half-up rounding, counter signal
    return Label.SMALL if math.floor(avg + 0.5) >= 5 else Label.BIG


CLASSIFIERS: dict[str, Callable[..., Label]] = {
    "exponential_trend": exponential_trend,
    "frequency_distribution": frequency_distribution,
    "streak_detection": streak_detection,
    "alternating_pattern": alternating_pattern,
    "mirror_logic": mirror_logic,
    "odd_even_correlation": odd_even_correlation,
    "gap_analysis": gap_analysis,
    "sum_modulo_pattern": sum_modulo_pattern,
    "prime_influence": prime_influence,
    "fibonacci_resonance": fibonacci_resonance,
    "weighted_sum": weighted_sum,
    "position_offset": position_offset,
    "xor_window": xor_window,
    "rolling_average": rolling_average,
}
