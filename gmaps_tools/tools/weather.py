"""Weather API tools. These endpoints take nested location.* query names and send Content-Type."""
from gmaps_tools.tools.base import HeaderPolicy, Parameter, ToolDescriptor
from gmaps_tools.tools.registry import register

WEATHER_URL = "https://weather.googleapis.com/v1"

UNITS_SYSTEMS = ("METRIC", "IMPERIAL")


def _coordinates(subject: str) -> tuple[Parameter, Parameter]:
    return (
        Parameter(
            "latitude",
            "number",
            f"The latitude {subject}.",
            required=True,
            query_name="location.latitude",
        ),
        Parameter(
            "longitude",
            "number",
            f"The longitude {subject}.",
            required=True,
            query_name="location.longitude",
        ),
    )


def _units_system() -> Parameter:
    return Parameter(
        "unitsSystem",
        "string",
        "The units system to use for the returned weather conditions.",
        default="METRIC",
        enum=UNITS_SYSTEMS,
    )


_LANGUAGE_CODE = Parameter("languageCode", "string", "The language for the response.", default="en")

FORECAST_DAYS = ToolDescriptor(
    name="forecast_days",
    description="Get the daily weather forecast based on location.",
    url=f"{WEATHER_URL}/forecast/days:lookup",
    header_policy=HeaderPolicy.CONTENT_TYPE_JSON,
    parameters=(
        *_coordinates("to get the daily forecast for the requested location"),
        Parameter(
            "pageSize",
            "integer",
            "The maximum number of daily forecast records to return per page (1 to 10).",
            default=5,
        ),
        Parameter(
            "pageToken",
            "string",
            "A page token received from a previous request to retrieve the subsequent page.",
        ),
        Parameter(
            "days",
            "integer",
            "Limits the amount of total days to fetch starting from the current day (1 to 10).",
            default=10,
        ),
        _LANGUAGE_CODE,
    ),
)

FORECAST_HOURS = ToolDescriptor(
    name="forecast_hours",
    description="Get hourly weather forecast based on location.",
    url=f"{WEATHER_URL}/forecast/hours:lookup",
    header_policy=HeaderPolicy.CONTENT_TYPE_JSON,
    parameters=(
        *_coordinates("to get the hourly forecast for the requested location"),
        _units_system(),
        Parameter(
            "pageSize",
            "integer",
            "The maximum number of hourly forecast records to return per page.",
            default=24,
        ),
        Parameter("pageToken", "string", "A page token received from a previous request."),
        Parameter(
            "days",
            "integer",
            "Limits the amount of total hours to fetch starting from the current hour.",
            default=240,
        ),
        _LANGUAGE_CODE,
    ),
)

HISTORY_HOURS = ToolDescriptor(
    name="get_hourly_weather",
    description="Retrieve hourly historical weather data from the Google Maps Platform.",
    url=f"{WEATHER_URL}/history/hours:lookup",
    header_policy=HeaderPolicy.CONTENT_TYPE_JSON,
    parameters=(
        *_coordinates("of the location to get the weather data for"),
        _units_system(),
        Parameter(
            "pageSize",
            "integer",
            "The maximum number of hourly historical records to return per page.",
            default=24,
        ),
        Parameter("pageToken", "string", "A page token received from a previous request for pagination."),
        Parameter(
            "hours",
            "integer",
            "Limits the amount of total hours to fetch starting from the last hour.",
            default=24,
        ),
        _LANGUAGE_CODE,
    ),
)

CURRENT_CONDITIONS = ToolDescriptor(
    name="current_conditions",
    description="Get current weather conditions based on latitude and longitude.",
    url=f"{WEATHER_URL}/currentConditions:lookup",
    header_policy=HeaderPolicy.CONTENT_TYPE_JSON,
    parameters=(
        *_coordinates("for the location where weather is being requested"),
        _units_system(),
        _LANGUAGE_CODE,
    ),
)

# Register on import so the registry sees the tools
for _descriptor in (FORECAST_DAYS, FORECAST_HOURS, HISTORY_HOURS, CURRENT_CONDITIONS):
    register(_descriptor)
