from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class FailureStage(str, Enum):
    TRANSPORT = "transport"  # Provider raised or the network failed
    NORMALIZATION = "normalization"  # Reply was not parsable JSON
    VALIDATION = "validation"  # JSON did not match the declared shape


class QueryFailure(BaseModel):
    """Why a query fell back. Only ever logged, never returned to callers."""

    stage: FailureStage
    detail: str
    raw_text: Optional[str] = Field(default=None)


class ParsedResponse(BaseModel):
    """JSON value recovered from a model reply, not yet checked against a shape."""

    value: Any
