"""Constants for the Shelly Cloud client."""

# Default cloud servers by region
DEFAULT_SERVER_URIS = {
    "eu": "https://shelly-10-eu.shelly.cloud",
    "us": "https://shelly-10-us.shelly.cloud",
}
DEFAULT_REGION = "eu"

# API endpoints
ENDPOINT_ALL_STATUS = "/device/all_status"
ENDPOINT_STATUS = "/device/status"
ENDPOINT_LIGHT_CONTROL = "/device/light/control"
ENDPOINT_RELAY_CONTROL = "/device/relay/control"

DEFAULT_RATE_LIMIT_MS = 1000
MIN_RATE_LIMIT_MS = 1000
DEFAULT_CACHE_TTL = 60.0  # seconds
DEFAULT_TIMEOUT = 10  # seconds

# Vendor code fragment -> device category, checked in order
CATEGORY_RULES = (
    ("SPDM", "dimmer"),
    ("SPSW", "switch"),
    ("SPEM", "energy_meter"),
    ("S3SN", "sensor"),
    ("S3SW", "switch"),
    ("SNGW", "gateway"),
)
THERMOSTAT_CODE = "THERMOSTAT"
UNKNOWN_CATEGORY = "unknown"

# Component keys searched for a temperature, in order
TEMPERATURE_SOURCES = (
    "temperature:0",
    *(f"switch:{i}" for i in range(4)),
    *(f"light:{i}" for i in range(2)),
    "em:0",
)
