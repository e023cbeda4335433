from typing import List

from pydantic import StrictStr

from cropgpt.models.query_result import QueryResult


class FarmingTask(QueryResult):
    """One phase of the cultivation schedule."""

    timeframe: StrictStr
    task: StrictStr
    details: StrictStr


class FarmingCalendar(QueryResult):
    """Phased task schedule for growing a crop, land preparation to harvest."""

    crop: StrictStr
    schedule: List[FarmingTask]
