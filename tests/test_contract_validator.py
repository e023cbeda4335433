from cropgpt.models.crop_diagnosis import CropDiagnosis
from cropgpt.models.market_price import MarketPrice
from cropgpt.models.query_failure import FailureStage, QueryFailure
from cropgpt.models.weather import WeatherSnapshot
from cropgpt.services.contract_validator import validate_contract

WEATHER = {
    "city": "Pune",
    "temperature": 31,
    "condition": "Sunny",
    "humidity": 40,
    "windSpeed": 10.5,
    "forecast": [
        {"day": "Mon", "temp": 30, "condition": "Cloudy"},
        {"day": "Tue", "temp": 29.5, "condition": "Rain"},
    ],
}


def test_matching_shape_builds_the_model():
    result = validate_contract(WEATHER, WeatherSnapshot)

    assert isinstance(result, WeatherSnapshot)
    assert result.wind_speed == 10.5
    assert [day.day for day in result.forecast] == ["Mon", "Tue"]
    assert result.model_dump(by_alias=True) == WEATHER


def test_implausible_values_are_accepted():
    result = validate_contract({**WEATHER, "temperature": 999}, WeatherSnapshot)
    assert isinstance(result, WeatherSnapshot)
    assert result.temperature == 999


def test_missing_field_is_rejected():
    value = dict(WEATHER)
    del value["humidity"]

    result = validate_contract(value, WeatherSnapshot)

    assert isinstance(result, QueryFailure)
    assert result.stage == FailureStage.VALIDATION
    assert "humidity" in result.detail


def test_extra_field_is_rejected():
    result = validate_contract({**WEATHER, "uvIndex": 7}, WeatherSnapshot)
    assert isinstance(result, QueryFailure)


def test_snake_case_field_names_are_rejected():
    value = dict(WEATHER)
    value["wind_speed"] = value.pop("windSpeed")
    assert isinstance(validate_contract(value, WeatherSnapshot), QueryFailure)


def test_number_is_not_coerced_to_string():
    value = {
        "crop": "Wheat",
        "price": 2200,
        "market": "Delhi Mandi",
        "lastUpdated": "2024-05-01",
    }
    assert isinstance(validate_contract(value, MarketPrice), QueryFailure)


def test_numeric_string_is_not_coerced_to_number():
    result = validate_contract({**WEATHER, "temperature": "31"}, WeatherSnapshot)
    assert isinstance(result, QueryFailure)


def test_boolean_is_not_a_number():
    result = validate_contract({**WEATHER, "humidity": True}, WeatherSnapshot)
    assert isinstance(result, QueryFailure)


def test_non_object_forecast_entries_are_rejected():
    result = validate_contract({**WEATHER, "forecast": ["Mon: sunny"]}, WeatherSnapshot)
    assert isinstance(result, QueryFailure)
    assert result.stage == FailureStage.VALIDATION


def test_non_string_list_items_are_rejected():
    value = {
        "cropName": "Tomato",
        "healthStatus": "Diseased",
        "disease": "Early blight",
        "recommendations": ["Remove infected leaves", 3],
    }
    assert isinstance(validate_contract(value, CropDiagnosis), QueryFailure)


def test_optional_lists_may_be_absent():
    value = {
        "cropName": "Tomato",
        "healthStatus": "Healthy",
        "disease": "None",
        "recommendations": [],
    }
    result = validate_contract(value, CropDiagnosis)

    assert isinstance(result, CropDiagnosis)
    assert result.fertilizers is None
    assert result.pesticides is None


def test_top_level_array_is_rejected():
    result = validate_contract([WEATHER], WeatherSnapshot)
    assert isinstance(result, QueryFailure)
    assert result.stage == FailureStage.VALIDATION


def test_explicit_null_for_optional_list_is_rejected():
    value = {
        "cropName": "Tomato",
        "healthStatus": "Healthy",
        "disease": "None",
        "recommendations": [],
        "pesticides": None,
    }
    result = validate_contract(value, CropDiagnosis)

    assert isinstance(result, QueryFailure)
    assert "pesticides" in result.detail
