from pydantic import StrictStr

from cropgpt.models.query_result import QueryResult


class MarketPrice(QueryResult):
    """Price quote for a crop at a mandi."""

    crop: StrictStr
    price: StrictStr
    market: StrictStr
    last_updated: StrictStr
