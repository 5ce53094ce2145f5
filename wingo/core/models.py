from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Label(str, Enum):
    BIG = "BIG"
    SMALL = "SMALL"


class ResultStatus(str, Enum):
    PENDING = "PENDING"
    WIN = "WIN"
    LOSS = "LOSS"

    @property
    def display(self) -> str:
        return {"PENDING": "PENDING ⏳", "WIN": "WIN ✅", "LOSS": "LOSS ❌"}[self.value]


def label_of(number: int) -> Label:
    # 0-4 SMALL, 5-9 BIG on the last digit
    return Label.BIG if number % 10 >= 5 else Label.SMALL


def opposite(label: Label) -> Label:
    return Label.SMALL if label == Label.BIG else Label.BIG


@dataclass(frozen=True)
class DrawRecord:
    period: str
    number: int
    label: Label = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "label", label_of(self.number))

    @property
    def digit(self) -> int:
        return self.number % 10


@dataclass(frozen=True)
class PredictionState:
    last_predicted_period: Optional[str] = None
    last_prediction_value: Optional[Label] = None
    timestamp: Optional[datetime] = None
