class PredictionError(Exception):
    """Base class for failures that abort a prediction cycle."""


class FetchError(PredictionError):
    """Upstream history feed unreachable after all retries."""


class DataShapeError(PredictionError):
    """Upstream payload does not have the expected structure."""


class InsufficientHistoryError(PredictionError):
    """Not enough draws to classify."""
