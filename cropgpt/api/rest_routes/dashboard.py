from fastapi import APIRouter, Depends, HTTPException, Query, status

from cropgpt.core.genai_client import GenAIProvider, get_genai_provider
from cropgpt.models.crop_yield import YieldEstimate
from cropgpt.models.farming_calendar import FarmingCalendar
from cropgpt.models.government_scheme import SchemeCatalog
from cropgpt.models.market_price import MarketPrice
from cropgpt.models.water_requirement import WaterRequirement
from cropgpt.models.weather import WeatherSnapshot
from cropgpt.services.query_service import (
    get_farming_calendar,
    get_government_schemes,
    get_market_price_data,
    get_water_content_data,
    get_weather_data,
    get_weather_data_by_city,
    get_yield_data,
)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def _unavailable(what: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=f"Could not fetch {what}. Please try again.",
    )


@router.get("/weather", response_model=WeatherSnapshot)
async def get_weather_for_location(
    lat: float = Query(..., description="Latitude", ge=-90, le=90),
    lon: float = Query(..., description="Longitude", ge=-180, le=180),
    provider: GenAIProvider = Depends(get_genai_provider),
):
    """
    Get current weather and a 5-day forecast for a specific location.
    """
    weather = await get_weather_data(lat, lon, provider=provider)
    if weather is None:
        raise _unavailable("weather data")
    return weather


@router.get("/weather/city", response_model=WeatherSnapshot)
async def get_weather_for_city(
    city: str = Query(..., min_length=1, description="City name"),
    provider: GenAIProvider = Depends(get_genai_provider),
):
    """
    Get current weather and a 5-day forecast for a city.
    """
    weather = await get_weather_data_by_city(city, provider=provider)
    if weather is None:
        raise _unavailable(f"weather data for {city}")
    return weather


@router.get("/market-price", response_model=MarketPrice)
async def get_market_price(
    crop: str = Query(..., min_length=1),
    city: str = Query(..., min_length=1),
    state: str = Query(..., min_length=1),
    provider: GenAIProvider = Depends(get_genai_provider),
):
    price = await get_market_price_data(crop, city, state, provider=provider)
    if price is None:
        raise _unavailable("market price data")
    return price


@router.get("/yield", response_model=YieldEstimate)
async def get_crop_yield(
    crop: str = Query(..., min_length=1),
    provider: GenAIProvider = Depends(get_genai_provider),
):
    crop_yield = await get_yield_data(crop, provider=provider)
    if crop_yield is None:
        raise _unavailable("yield data")
    return crop_yield


@router.get("/water", response_model=WaterRequirement)
async def get_water_requirement(
    crop: str = Query(..., min_length=1),
    provider: GenAIProvider = Depends(get_genai_provider),
):
    water = await get_water_content_data(crop, provider=provider)
    if water is None:
        raise _unavailable("water requirement data")
    return water


@router.get("/schemes", response_model=SchemeCatalog)
async def list_government_schemes(
    provider: GenAIProvider = Depends(get_genai_provider),
):
    """
    Get the major government schemes available for farmers in India.
    """
    schemes = await get_government_schemes(provider=provider)
    if schemes is None:
        raise _unavailable("government schemes")
    return schemes


@router.get("/calendar", response_model=FarmingCalendar)
async def get_crop_calendar(
    crop: str = Query(..., min_length=1),
    provider: GenAIProvider = Depends(get_genai_provider),
):
    calendar = await get_farming_calendar(crop, provider=provider)
    if calendar is None:
        raise _unavailable("farming calendar")
    return calendar
