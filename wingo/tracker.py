import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional, Sequence

from wingo.core.models import DrawRecord, Label, PredictionState, ResultStatus


def next_period(period: str) -> str:
    # periods can exceed 64-bit range; python ints are unbounded
    return str(int(period) + 1)


class PredictionTracker:
    """Holds the single outstanding prediction and grades it once its draw appears."""

    def __init__(self):
        self.state = PredictionState()
        self._lock = threading.Lock()

    @contextmanager
    def cycle(self) -> Iterator["PredictionTracker"]:
        with self._lock:
            yield self

    def resolve(self, draws: Sequence[DrawRecord]) -> ResultStatus:
        st = self.state
        if st.last_predicted_period is None:
            return ResultStatus.PENDING
        actual = next((d for d in draws if d.period == st.last_predicted_period), None)
        if actual is None:
            return ResultStatus.PENDING
        return ResultStatus.WIN if actual.label == st.last_prediction_value else ResultStatus.LOSS

    def record(self, period: str, label: Label, now: Optional[datetime] = None):
        self.state = PredictionState(
            last_predicted_period=period,
            last_prediction_value=label,
            timestamp=now or datetime.now(timezone.utc),
        )

    def reset(self):
        self.state = PredictionState()
