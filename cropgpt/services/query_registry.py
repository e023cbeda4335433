from enum import Enum
from typing import Any, Optional, Type

from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel, ConfigDict

from cropgpt.models.crop_diagnosis import CropDiagnosis
from cropgpt.models.crop_yield import YieldEstimate
from cropgpt.models.farming_calendar import FarmingCalendar
from cropgpt.models.government_scheme import SchemeCatalog
from cropgpt.models.market_price import MarketPrice
from cropgpt.models.query_result import QueryResult
from cropgpt.models.water_requirement import WaterRequirement
from cropgpt.models.weather import WeatherSnapshot
from cropgpt.prompts.query_prompts import (
    CROP_IMAGE_ANALYSIS_PROMPT,
    CROP_YIELD_PROMPT,
    FARMING_CALENDAR_PROMPT,
    GOVERNMENT_SCHEMES_PROMPT,
    MARKET_PRICE_PROMPT,
    WATER_REQUIREMENT_PROMPT,
    WEATHER_BY_CITY_PROMPT,
    WEATHER_BY_COORDINATES_PROMPT,
)


class QueryKind(str, Enum):
    WEATHER_BY_COORDINATES = "weather_by_coordinates"
    WEATHER_BY_CITY = "weather_by_city"
    MARKET_PRICE = "market_price"
    CROP_YIELD = "crop_yield"
    WATER_REQUIREMENT = "water_requirement"
    GOVERNMENT_SCHEMES = "government_schemes"
    FARMING_CALENDAR = "farming_calendar"
    CROP_IMAGE_ANALYSIS = "crop_image_analysis"


class QueryContract(BaseModel):
    """Declaration of one query kind: what to ask, what shape to expect back,
    and what to hand the caller when the answer is unusable.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: QueryKind
    prompt: PromptTemplate
    result_model: Type[QueryResult]
    fallback: Optional[QueryResult] = None

    @property
    def parameters(self) -> list[str]:
        return sorted(self.prompt.input_variables)

    def render_prompt(self, **params: Any) -> str:
        expected = set(self.prompt.input_variables)
        given = set(params)
        if given != expected:
            raise ValueError(
                f"{self.kind.value} prompt expects parameters {sorted(expected)}, "
                f"got {sorted(given)}"
            )
        return self.prompt.format(**params)


def _contract(
    kind: QueryKind, template: str, result_model: Type[QueryResult]
) -> QueryContract:
    return QueryContract(
        kind=kind,
        prompt=PromptTemplate.from_template(template),
        result_model=result_model,
    )


QUERY_CONTRACTS: dict[QueryKind, QueryContract] = {
    contract.kind: contract
    for contract in (
        _contract(
            QueryKind.WEATHER_BY_COORDINATES,
            WEATHER_BY_COORDINATES_PROMPT,
            WeatherSnapshot,
        ),
        _contract(QueryKind.WEATHER_BY_CITY, WEATHER_BY_CITY_PROMPT, WeatherSnapshot),
        _contract(QueryKind.MARKET_PRICE, MARKET_PRICE_PROMPT, MarketPrice),
        _contract(QueryKind.CROP_YIELD, CROP_YIELD_PROMPT, YieldEstimate),
        _contract(
            QueryKind.WATER_REQUIREMENT, WATER_REQUIREMENT_PROMPT, WaterRequirement
        ),
        _contract(
            QueryKind.GOVERNMENT_SCHEMES, GOVERNMENT_SCHEMES_PROMPT, SchemeCatalog
        ),
        _contract(
            QueryKind.FARMING_CALENDAR, FARMING_CALENDAR_PROMPT, FarmingCalendar
        ),
        _contract(
            QueryKind.CROP_IMAGE_ANALYSIS, CROP_IMAGE_ANALYSIS_PROMPT, CropDiagnosis
        ),
    )
}


def get_query_contract(kind: QueryKind) -> QueryContract:
    return QUERY_CONTRACTS[kind]
