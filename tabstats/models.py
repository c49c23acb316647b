from typing import Any

from pydantic import BaseModel


class AnalysisRequest(BaseModel):
    data: Any = None  # checked by analysis.validate_dataset
    options: dict[str, Any] = {}


class UploadResponse(BaseModel):
    message: str
    data: list[dict[str, Any]] = []
    row_count: int = 0
