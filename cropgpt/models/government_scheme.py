from typing import List

from pydantic import Field, StrictStr

from cropgpt.models.query_result import QueryResult


class GovernmentScheme(QueryResult):
    """A single government support programme for farmers."""

    name: StrictStr
    description: StrictStr
    eligibility: StrictStr
    link: StrictStr = Field(description="Official link, may be empty if none is known.")


class SchemeCatalog(QueryResult):
    schemes: List[GovernmentScheme]
