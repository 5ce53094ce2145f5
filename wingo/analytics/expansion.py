from typing import NamedTuple, Optional


class ModelSpec(NamedTuple):
    kind: str
    params: dict
    weight: int = 1

    @property
    def name(self) -> str:
        args = ",".join(f"{k}={v}" for k, v in self.params.items())
        return f"{self.kind}({args})"


def build_micro_models(history_length: Optional[int] = None) -> list[ModelSpec]:
    """Enumerate the equal-weight variant pool.

    Order and parameters are fixed so the pool is reproducible. When
    ``history_length`` is given, position variants pointing before the first
    draw are left out.
    """
    specs: list[ModelSpec] = []
    # decay 0.70 .. 0.94 step 0.02
    for i in range(13):
        specs.append(ModelSpec("exponential_trend", {"lookback": 20, "decay": round(0.70 + 0.02 * i, 2)}))
    for lookback in range(15, 51, 3):
        specs.append(ModelSpec("frequency_distribution", {"lookback": lookback}))
    for lookback in range(5, 21, 2):
        specs.append(ModelSpec("alternating_pattern", {"lookback": lookback}))
    for lookback in range(3, 13):
        specs.append(ModelSpec("mirror_logic", {"lookback": lookback}))
    for lookback in range(8, 23, 2):
        specs.append(ModelSpec("gap_analysis", {"lookback": lookback}))
    for i in range(12):
        specs.append(ModelSpec("weighted_sum", {"lookback": 5 + i, "exponent": round(1.2 + i * 0.1, 1)}))
    for offset in range(10):
        if history_length is None or offset < history_length:
            specs.append(ModelSpec("position_offset", {"offset": offset}))
    for size in range(2, 10):
        specs.append(ModelSpec("xor_window", {"size": size}))
    for window in range(3, 15):
        specs.append(ModelSpec("rolling_average", {"window": window}))
    return specs


MICRO_MODELS = build_micro_models()
