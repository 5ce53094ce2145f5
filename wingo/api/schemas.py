from pydantic import BaseModel, ConfigDict, Field


class VotesOut(BaseModel):
    BIG: int
    SMALL: int


class MetaOut(BaseModel):
    total_models_used: int
    votes_distribution: VotesOut
    data_points_analyzed: int


class PredictionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    last_period: str
    last_result: str
    result_status: str
    next_period: str
    prediction: str
    confidence_score: str
    meta: MetaOut = Field(alias="_meta")


class PredictEnvelope(BaseModel):
    success: bool = True
    data: PredictionOut
    execution_time_ms: int
    timestamp: str


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: str
    timestamp: str


class HealthOut(BaseModel):
    status: str
    uptime_seconds: int
    memory_usage: dict[str, int]
    timestamp: str
