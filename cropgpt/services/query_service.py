import logging
from typing import Any, Optional

from cropgpt.core.genai_client import GenAIProvider, get_genai_provider
from cropgpt.core.langchain_message_adapter import InlineAttachment
from cropgpt.models.crop_diagnosis import CropDiagnosis
from cropgpt.models.crop_yield import YieldEstimate
from cropgpt.models.farming_calendar import FarmingCalendar
from cropgpt.models.government_scheme import SchemeCatalog
from cropgpt.models.market_price import MarketPrice
from cropgpt.models.query_failure import FailureStage, QueryFailure
from cropgpt.models.query_result import QueryResult
from cropgpt.models.water_requirement import WaterRequirement
from cropgpt.models.weather import WeatherSnapshot
from cropgpt.services.contract_validator import validate_contract
from cropgpt.services.query_registry import QueryKind, get_query_contract
from cropgpt.services.response_normalizer import normalize_response

logger = logging.getLogger(__name__)


def _log_failure(kind: QueryKind, failure: QueryFailure) -> None:
    if failure.raw_text is not None:
        logger.warning(
            "%s query fell back (%s): %s. Original text: %r",
            kind.value,
            failure.stage.value,
            failure.detail,
            failure.raw_text,
        )
    else:
        logger.warning(
            "%s query fell back (%s): %s",
            kind.value,
            failure.stage.value,
            failure.detail,
        )


async def run_query(
    kind: QueryKind,
    *,
    provider: Optional[GenAIProvider] = None,
    attachment: Optional[InlineAttachment] = None,
    **params: Any,
) -> Optional[QueryResult]:
    """
    Asks the model one structured question and returns the typed answer.

    Every failure after the prompt is rendered (provider error, unparsable
    reply, shape mismatch) is logged and replaced by the contract fallback.

    Args:
        kind: Which query to run.
        provider: Model provider; the process-wide one when omitted.
        attachment: Inline binary payload sent with the prompt.
        **params: Prompt parameters for this kind.

    Returns:
        The validated result model, or the contract fallback (None).
    """
    contract = get_query_contract(kind)
    prompt = contract.render_prompt(**params)
    provider = provider or get_genai_provider()

    try:
        raw_text = await provider.generate(prompt, attachment=attachment)
    except Exception as exc:
        failure = QueryFailure(stage=FailureStage.TRANSPORT, detail=repr(exc))
        logger.exception(
            "%s query fell back (%s): %s",
            kind.value,
            failure.stage.value,
            failure.detail,
        )
        return contract.fallback

    normalized = normalize_response(raw_text)
    if isinstance(normalized, QueryFailure):
        _log_failure(kind, normalized)
        return contract.fallback

    result = validate_contract(normalized.value, contract.result_model)
    if isinstance(result, QueryFailure):
        result.raw_text = raw_text
        _log_failure(kind, result)
        return contract.fallback

    return result


async def get_weather_data(
    lat: float, lon: float, *, provider: Optional[GenAIProvider] = None
) -> Optional[WeatherSnapshot]:
    return await run_query(
        QueryKind.WEATHER_BY_COORDINATES, provider=provider, lat=lat, lon=lon
    )


async def get_weather_data_by_city(
    city: str, *, provider: Optional[GenAIProvider] = None
) -> Optional[WeatherSnapshot]:
    return await run_query(QueryKind.WEATHER_BY_CITY, provider=provider, city=city)


async def get_market_price_data(
    crop: str, city: str, state: str, *, provider: Optional[GenAIProvider] = None
) -> Optional[MarketPrice]:
    return await run_query(
        QueryKind.MARKET_PRICE, provider=provider, crop=crop, city=city, state=state
    )


async def get_yield_data(
    crop: str, *, provider: Optional[GenAIProvider] = None
) -> Optional[YieldEstimate]:
    return await run_query(QueryKind.CROP_YIELD, provider=provider, crop=crop)


async def get_water_content_data(
    crop: str, *, provider: Optional[GenAIProvider] = None
) -> Optional[WaterRequirement]:
    return await run_query(QueryKind.WATER_REQUIREMENT, provider=provider, crop=crop)


async def get_government_schemes(
    *, provider: Optional[GenAIProvider] = None
) -> Optional[SchemeCatalog]:
    return await run_query(QueryKind.GOVERNMENT_SCHEMES, provider=provider)


async def get_farming_calendar(
    crop: str, *, provider: Optional[GenAIProvider] = None
) -> Optional[FarmingCalendar]:
    return await run_query(QueryKind.FARMING_CALENDAR, provider=provider, crop=crop)


async def analyze_crop_image(
    image: bytes,
    mime_type: str = "image/jpeg",
    *,
    provider: Optional[GenAIProvider] = None,
) -> Optional[CropDiagnosis]:
    """
    Diagnoses a crop photo.

    Args:
        image: Raw image bytes.
        mime_type: Media type of the image.

    Returns:
        A CropDiagnosis or None if the analysis failed.
    """
    return await run_query(
        QueryKind.CROP_IMAGE_ANALYSIS,
        provider=provider,
        attachment=InlineAttachment(data=image, mime_type=mime_type),
    )
