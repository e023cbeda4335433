import pytest

from cropgpt.services.query_registry import QUERY_CONTRACTS, QueryKind, get_query_contract

PARAMS = {
    QueryKind.WEATHER_BY_COORDINATES: {"lat": 18.52, "lon": 73.86},
    QueryKind.WEATHER_BY_CITY: {"city": "Pune"},
    QueryKind.MARKET_PRICE: {"crop": "Wheat", "city": "Delhi", "state": "Delhi"},
    QueryKind.CROP_YIELD: {"crop": "Rice"},
    QueryKind.WATER_REQUIREMENT: {"crop": "Sugarcane"},
    QueryKind.GOVERNMENT_SCHEMES: {},
    QueryKind.FARMING_CALENDAR: {"crop": "Cotton"},
    QueryKind.CROP_IMAGE_ANALYSIS: {},
}


def test_every_kind_is_registered():
    assert set(QUERY_CONTRACTS) == set(QueryKind)


@pytest.mark.parametrize("kind", list(QueryKind))
def test_prompt_spells_out_every_field(kind):
    contract = get_query_contract(kind)
    prompt = contract.render_prompt(**PARAMS[kind])

    assert "Respond with ONLY a JSON object" in prompt
    for field in contract.result_model.model_fields.values():
        assert f'"{field.alias}"' in prompt


@pytest.mark.parametrize("kind", list(QueryKind))
def test_fallback_is_absence(kind):
    assert get_query_contract(kind).fallback is None


def test_parameters_are_interpolated():
    prompt = get_query_contract(QueryKind.MARKET_PRICE).render_prompt(
        crop="Onion", city="Nashik", state="Maharashtra"
    )
    assert "Onion in Nashik, Maharashtra, India" in prompt
    assert '{"crop": "string"' in prompt


def test_coordinates_are_interpolated():
    contract = get_query_contract(QueryKind.WEATHER_BY_COORDINATES)
    prompt = contract.render_prompt(lat=18.52, lon=73.86)

    assert contract.parameters == ["lat", "lon"]
    assert "latitude 18.52 and longitude 73.86" in prompt


def test_missing_parameter_is_rejected():
    with pytest.raises(ValueError):
        get_query_contract(QueryKind.MARKET_PRICE).render_prompt(crop="Onion")


def test_unexpected_parameter_is_rejected():
    with pytest.raises(ValueError):
        get_query_contract(QueryKind.GOVERNMENT_SCHEMES).render_prompt(crop="Onion")
