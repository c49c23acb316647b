from typing import Any

from pydantic import BaseModel


class AnalysisMetadata(BaseModel):
    execution_time_ms: float
    timestamp: str  # ISO-8601, UTC, time of completion
    parameters: dict[str, Any] = {}


class AnalysisResult(BaseModel):
    type: str
    title: str
    description: str
    data: dict[str, Any]  # payload, shape depends on the analysis type
    metadata: AnalysisMetadata | None = None
