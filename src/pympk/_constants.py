"""Internal constants shared across the library."""

FEED_URL = "http://rozklady.lodz.pl/Home/CNR_GetVehicles"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

#: Seconds between two poll cycles.
DEFAULT_POLL_INTERVAL: float = 15.0

NO_DATA_MESSAGE = "no data"

# ------------------------------------------------------------------
# Vehicle record layout  (", "-joined fields inside each <p> element)
# ------------------------------------------------------------------

FIELD_SEPARATOR = ", "
MIN_FIELD_COUNT = 11
VEHICLE_ID_FIELD = 1
LONGITUDE_FIELD = 9
LATITUDE_FIELD = 10

# ------------------------------------------------------------------
# Map viewport
# ------------------------------------------------------------------

#: Span in degrees used when only one vehicle is on the map.
SINGLE_VEHICLE_SPAN: float = 0.005
#: Multiplier applied to the bounding box so edge pins are not clipped.
REGION_PADDING: float = 1.1
#: Edge length in metres of the region shown after selecting a pin.
FOCUS_RADIUS_M: float = 1000.0
METERS_PER_DEGREE: float = 111_320.0
