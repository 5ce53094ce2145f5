import random
import threading
from datetime import datetime, timezone
from typing import Optional

from wingo.analytics.ensemble import ensemble_predict
from wingo.config import settings
from wingo.core.validation import parse_history
from wingo.errors import InsufficientHistoryError
from wingo.fetcher import HistoryFetcher
from wingo.tracker import PredictionTracker, next_period


class PredictionService:
    def __init__(self, fetcher: Optional[HistoryFetcher] = None,
                 tracker: Optional[PredictionTracker] = None,
                 rng: Optional[random.Random] = None,
                 min_history: Optional[int] = None):
        self.fetcher = fetcher or HistoryFetcher()
        self.tracker = tracker or PredictionTracker()
        self.rng = rng or random.Random()
        self.min_history = min_history if min_history is not None else settings.min_history

    def generate_prediction(self) -> dict:
        draws = parse_history(self.fetcher.fetch())
        if len(draws) < self.min_history:
            raise InsufficientHistoryError("Insufficient historical data for accurate prediction")

        last = draws[-1]
        with self.tracker.cycle() as tracker:
            status = tracker.resolve(draws)
            nxt = next_period(last.period)
            result = ensemble_predict(draws, rng=self.rng)
            tracker.record(nxt, result.prediction, datetime.now(timezone.utc))

        return {
            'last_period': last.period,
            'last_result': last.label.value,
            'result_status': status.display,
            'next_period': nxt,
            'prediction': result.prediction.value,
            'confidence_score': f"{result.confidence}%",
            '_meta': {
                'total_models_used': result.total_models,
                'votes_distribution': {k.value: v for k, v in result.votes.items()},
                'data_points_analyzed': len(draws),
            },
        }


_service: Optional[PredictionService] = None
_service_lock = threading.Lock()


def get_service() -> PredictionService:
    global _service
    with _service_lock:
        if _service is None:
            _service = PredictionService()
        return _service
