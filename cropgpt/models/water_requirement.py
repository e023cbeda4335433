from typing import List

from pydantic import StrictStr

from cropgpt.models.query_result import QueryResult


class WaterRequirement(QueryResult):
    crop: StrictStr
    water_requirement: StrictStr
    farming_tips: List[StrictStr]
