from typing import List

from pydantic import Field, StrictFloat, StrictStr

from cropgpt.models.query_result import QueryResult


class DailyForecast(QueryResult):
    """Forecast entry for a single day."""

    day: StrictStr = Field(description="Day label, e.g. 'Mon' or a date.")
    temp: StrictFloat = Field(description="Expected temperature in Celsius.")
    condition: StrictStr = Field(description="Short sky condition, e.g. 'Sunny'.")


class WeatherSnapshot(QueryResult):
    """Current weather and a 5-day forecast for a place."""

    city: StrictStr
    temperature: StrictFloat
    condition: StrictStr
    humidity: StrictFloat
    wind_speed: StrictFloat
    forecast: List[DailyForecast]
