"""Travel tools: Distance Matrix, Roads (nearest roads, snap to roads) and Time Zone."""
from gmaps_tools.tools.base import Parameter, ToolDescriptor
from gmaps_tools.tools.registry import register

ROADS_URL = "https://roads.googleapis.com/v1"

DISTANCE_MATRIX = ToolDescriptor(
    name="distance_matrix",
    description="Calculate travel distance and time using the Google Maps Distance Matrix API.",
    url="https://maps.googleapis.com/maps/api/distancematrix/json",
    parameters=(
        Parameter(
            "origins",
            "string",
            "The starting point(s) for calculating travel distance and time.",
            required=True,
        ),
        Parameter(
            "destinations",
            "string",
            "The finishing point(s) for calculating travel distance and time.",
            required=True,
        ),
        Parameter(
            "mode",
            "string",
            "The transportation mode to use.",
            default="driving",
            enum=("driving", "walking", "bicycling", "transit"),
        ),
        Parameter("units", "string", "The unit system to use when displaying results.", default="metric"),
        Parameter("language", "string", "The language in which to return results.", default="en"),
        Parameter(
            "departure_time",
            "integer",
            "Desired time of departure in seconds since midnight, January 1, 1970 UTC.",
        ),
        Parameter("avoid", "string", "Restrictions to avoid (e.g., tolls, highways)."),
        Parameter(
            "traffic_model",
            "string",
            "Assumptions to use when calculating time in traffic.",
            default="best_guess",
            send_when_falsy=False,
        ),
    ),
)

NEAREST_ROADS = ToolDescriptor(
    name="nearest_roads",
    description="Find the nearest roads for a given set of GPS coordinates.",
    url=f"{ROADS_URL}/nearestRoads",
    parameters=(
        Parameter(
            "points",
            "string",
            "The path to be snapped, formatted as latitude/longitude pairs separated by commas and pipe characters.",
            required=True,
        ),
    ),
)

SNAP_TO_ROADS = ToolDescriptor(
    name="snap_to_roads",
    description="Snap GPS coordinates to the nearest roads.",
    url=f"{ROADS_URL}/snaptoroads",
    parameters=(
        Parameter("path", "string", "The path to be snapped, consisting of latitude/longitude pairs.", required=True),
        Parameter(
            "interpolate",
            "boolean",
            "Whether to interpolate a path to include all points forming the full road geometry.",
            default=False,
        ),
    ),
)

GET_TIME_ZONE = ToolDescriptor(
    name="get_time_zone",
    description="Get the time zone information for a specific location and timestamp.",
    url="https://www.googleapis.com/maps/api/timezone/json",
    parameters=(
        Parameter(
            "location",
            "string",
            "A comma-separated latitude,longitude tuple representing the location to look up.",
            required=True,
        ),
        Parameter(
            "timestamp",
            "number",
            "The desired time as seconds since midnight, January 1, 1970 UTC.",
            required=True,
        ),
    ),
)

# Register on import so the registry sees the tools
for _descriptor in (DISTANCE_MATRIX, NEAREST_ROADS, SNAP_TO_ROADS, GET_TIME_ZONE):
    register(_descriptor)
