import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger

from wingo.api.schemas import ErrorEnvelope, PredictEnvelope
from wingo.errors import PredictionError
from wingo.services import PredictionService, get_service

router = APIRouter()


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get('/api/predict', response_model=PredictEnvelope, responses={500: {"model": ErrorEnvelope}})
def predict(service: PredictionService = Depends(get_service)):
    start = time.perf_counter()
    try:
        data = service.generate_prediction()
    except PredictionError as e:
        logger.error(f"Prediction error: {e}")
        return JSONResponse(status_code=500, content=ErrorEnvelope(error=str(e), timestamp=now_iso()).model_dump())
    except Exception as e:
        logger.exception("Unexpected prediction failure")
        return JSONResponse(status_code=500, content=ErrorEnvelope(error=str(e), timestamp=now_iso()).model_dump())
    return {
        'success': True,
        'data': data,
        'execution_time_ms': int((time.perf_counter() - start) * 1000),
        'timestamp': now_iso(),
    }
