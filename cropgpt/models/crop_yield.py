from typing import List

from pydantic import StrictStr

from cropgpt.models.query_result import QueryResult


class YieldEstimate(QueryResult):
    crop: StrictStr
    average_yield: StrictStr
    potential_yield: StrictStr
    factors: List[StrictStr]
