from typing import Any, List, Optional

from pydantic import Field, StrictStr, field_validator

from cropgpt.models.query_result import QueryResult


class CropDiagnosis(QueryResult):
    """Result of analyzing a photo of a crop."""

    crop_name: StrictStr
    health_status: StrictStr
    disease: StrictStr
    recommendations: List[StrictStr]
    fertilizers: Optional[List[StrictStr]] = Field(default=None)
    pesticides: Optional[List[StrictStr]] = Field(default=None)

    @field_validator("fertilizers", "pesticides", mode="before")
    @classmethod
    def _reject_explicit_null(cls, value: Any) -> Any:
        # The lists may be left out, but when present they must be arrays
        if value is None:
            raise ValueError("must be a list of strings when present")
        return value
