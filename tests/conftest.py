import random

import pytest

from wingo.core.models import DrawRecord

BASE_PERIOD = 20250101100010001


def draws_from(numbers, start=BASE_PERIOD):
    return [DrawRecord(period=str(start + i), number=n) for i, n in enumerate(numbers)]


def payload_from(numbers, start=BASE_PERIOD):
    # upstream order is newest first
    items = [{"issueNo": str(start + i), "number": str(n)} for i, n in enumerate(numbers)]
    return {"data": {"list": list(reversed(items))}}


class FixedRng:
    def __init__(self, value=0):
        self.value = value

    def randint(self, a, b):
        return self.value


class FakeFetcher:
    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.payload


@pytest.fixture
def history():
    rnd = random.Random(7)
    return draws_from([rnd.randint(0, 9) for _ in range(60)])
