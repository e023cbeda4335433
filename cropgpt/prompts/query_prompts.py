# Every prompt spells out the exact JSON shape it expects back; the field
# names here must match the aliases of the corresponding result model.
# Literal braces are doubled because these are PromptTemplate strings.

JSON_ONLY_INSTRUCTION = "Respond with ONLY a JSON object in the following format:"

WEATHER_SHAPE = (
    '{{"city": "string", "temperature": number, "condition": "string", '
    '"humidity": number, "windSpeed": number, '
    '"forecast": [{{"day": "string", "temp": number, "condition": "string"}}]}}'
)

WEATHER_BY_COORDINATES_PROMPT = (
    "Provide current weather and a 5-day forecast for latitude {lat} and "
    f"longitude {{lon}}. {JSON_ONLY_INSTRUCTION} {WEATHER_SHAPE}"
)

WEATHER_BY_CITY_PROMPT = (
    "Provide current weather and a 5-day forecast for the city: {city}. "
    f"{JSON_ONLY_INSTRUCTION} {WEATHER_SHAPE}"
)

MARKET_PRICE_PROMPT = (
    "What is the current market price for {crop} in {city}, {state}, India? "
    "Provide a realistic estimate. "
    f"{JSON_ONLY_INSTRUCTION} "
    '{{"crop": "string", "price": "string", "market": "string", '
    '"lastUpdated": "string"}}'
)

CROP_YIELD_PROMPT = (
    "Provide typical yield production data for {crop} in India. "
    f"{JSON_ONLY_INSTRUCTION} "
    '{{"crop": "string", "averageYield": "string", "potentialYield": "string", '
    '"factors": ["string", "string"]}}'
)

WATER_REQUIREMENT_PROMPT = (
    "Provide the water requirements for growing {crop} in India, including "
    "helpful farming tips. "
    f"{JSON_ONLY_INSTRUCTION} "
    '{{"crop": "string", "waterRequirement": "string", '
    '"farmingTips": ["string", "string"]}}'
)

GOVERNMENT_SCHEMES_PROMPT = (
    "List the top 5-7 major government schemes available for farmers in India. "
    "For each scheme, provide its name, a brief description, eligibility "
    "criteria, and an official link if available. "
    f"{JSON_ONLY_INSTRUCTION} "
    '{{"schemes": [{{"name": "string", "description": "string", '
    '"eligibility": "string", "link": "string"}}]}}'
)

FARMING_CALENDAR_PROMPT = (
    "Provide a generalized, week-by-week farming schedule for growing {crop} in "
    "India, starting from land preparation to harvest. The schedule should be "
    "practical for a typical farmer. "
    f"{JSON_ONLY_INSTRUCTION} "
    '{{"crop": "string", "schedule": [{{"timeframe": "string", "task": "string", '
    '"details": "string"}}]}}'
)

CROP_IMAGE_ANALYSIS_PROMPT = (
    "Analyze this image of a crop. Identify the crop, its health status, and any "
    "visible diseases or deficiencies. Provide practical recommendations, "
    "including specific fertilizer and pesticide names if applicable. "
    f"{JSON_ONLY_INSTRUCTION} "
    '{{"cropName": "string", "healthStatus": "string", "disease": "string", '
    '"recommendations": ["string", "string"], "fertilizers": ["string"], '
    '"pesticides": ["string"]}}'
)
