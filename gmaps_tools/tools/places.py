"""Places tools: autocomplete, query autocomplete, details, nearby, text search, find place."""
from gmaps_tools.tools.base import Parameter, ToolDescriptor
from gmaps_tools.tools.registry import register

PLACES_URL = "https://www.googleapis.com/maps/api/place"
PLACES_MAPS_URL = "https://maps.googleapis.com/maps/api/place"


def _language(
    description: str = "The language in which to return results.", send_when_falsy: bool = True
) -> Parameter:
    return Parameter("language", "string", description, default="en", send_when_falsy=send_when_falsy)


def _region(description: str, send_when_falsy: bool = True) -> Parameter:
    return Parameter("region", "string", description, default="en", send_when_falsy=send_when_falsy)


AUTOCOMPLETE_PLACE = ToolDescriptor(
    name="autocomplete_place",
    description="Perform Place Autocomplete search using Google Maps API.",
    url=f"{PLACES_URL}/autocomplete/json",
    parameters=(
        Parameter("input", "string", "The text string on which to search.", required=True),
        Parameter("sessiontoken", "string", "A random string which identifies an autocomplete session."),
        Parameter("components", "string", "A grouping of places to restrict results by country."),
        Parameter("strictbounds", "boolean", "Returns only places strictly within the defined region."),
        Parameter("offset", "integer", "The position of the last character used for matching predictions."),
        Parameter("origin", "string", "The origin point for calculating distance to the destination."),
        Parameter("location", "string", "The point around which to retrieve place information."),
        Parameter("radius", "integer", "The distance within which to return place results."),
        Parameter("types", "string", "Restrict results to certain types of places."),
        _language(send_when_falsy=False),
        _region("The region code for filtering results.", send_when_falsy=False),
    ),
)

QUERY_AUTOCOMPLETE = ToolDescriptor(
    name="query_autocomplete",
    description="Perform query autocomplete using Google Maps API.",
    url=f"{PLACES_URL}/queryautocomplete/json",
    parameters=(
        Parameter("input", "string", "The text string on which to search.", required=True),
        Parameter("offset", "integer", "The position of the last character used to match predictions."),
        Parameter(
            "location",
            "string",
            "The point around which to retrieve place information (latitude,longitude).",
        ),
        Parameter("radius", "integer", "Defines the distance (in meters) within which to return place results."),
        _language(),
    ),
)

GET_PLACE_DETAILS = ToolDescriptor(
    name="get_place_details",
    description="Fetch details about a specific place from the Google Places API.",
    url=f"{PLACES_URL}/details/json",
    parameters=(
        Parameter("place_id", "string", "The unique identifier for the place.", required=True),
        Parameter("fields", "string", "A comma-separated list of place data types to return."),
        Parameter("sessiontoken", "string", "A random string identifying an autocomplete session."),
        _language(),
        _region("The region code for the request."),
    ),
)

NEARBY_SEARCH = ToolDescriptor(
    name="nearby_search",
    description="Search for places within a specified area using the Google Maps Places API.",
    url=f"{PLACES_MAPS_URL}/nearbysearch/json",
    parameters=(
        Parameter(
            "location",
            "string",
            "The point around which to retrieve place information, specified as `latitude,longitude`.",
            required=True,
        ),
        Parameter("keyword", "string", "The text string on which to search, such as a place name or category."),
        Parameter("name", "string", "Equivalent to `keyword`, combined with values in the `keyword` field."),
        Parameter("radius", "number", "Defines the distance (in meters) within which to return place results."),
        Parameter("type", "string", "Restricts the results to places matching the specified type."),
        _language(),
    ),
)

TEXT_SEARCH = ToolDescriptor(
    name="text_search",
    description="Perform a text search using the Google Places API.",
    url=f"{PLACES_MAPS_URL}/textsearch/json",
    parameters=(
        Parameter("query", "string", "(Required) The text string on which to search.", required=True),
        Parameter(
            "location",
            "string",
            "The point around which to retrieve place information, specified as `latitude,longitude`.",
        ),
        Parameter(
            "maxprice",
            "string",
            "Restricts results to only those places within the specified maximum price range (0 to 4).",
        ),
        Parameter(
            "minprice",
            "string",
            "Restricts results to only those places within the specified minimum price range (0 to 4).",
        ),
        Parameter(
            "opennow",
            "boolean",
            "Returns only those places that are open for business at the time the query is sent.",
        ),
        Parameter("pagetoken", "string", "Returns up to 20 results from a previously run search."),
        Parameter("radius", "number", "Defines the distance (in meters) within which to return place results."),
        Parameter("type", "string", "Restricts the results to places matching the specified type."),
        _language(send_when_falsy=False),
        _region("The region code, specified as a two-character value.", send_when_falsy=False),
    ),
)

FIND_PLACE_FROM_TEXT = ToolDescriptor(
    name="find_place_from_text",
    description="Find a place from text using the Google Maps Places API.",
    url=f"{PLACES_URL}/findplacefromtext/json",
    parameters=(
        Parameter("input", "string", "The text string on which to search.", required=True),
        Parameter(
            "inputtype",
            "string",
            "The type of input.",
            required=True,
            enum=("textquery", "phonenumber"),
        ),
        Parameter("fields", "string", "A comma-separated list of place data types to return."),
        Parameter("locationbias", "string", "Prefer results in a specified area."),
        _language(),
    ),
)

# Register on import so the registry sees the tools
for _descriptor in (
    AUTOCOMPLETE_PLACE,
    QUERY_AUTOCOMPLETE,
    GET_PLACE_DETAILS,
    NEARBY_SEARCH,
    TEXT_SEARCH,
    FIND_PLACE_FROM_TEXT,
):
    register(_descriptor)
