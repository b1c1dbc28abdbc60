"""Constants for the outpass store REST adapter.

Routes of the security desk API exposed by the outpass backend.
"""

SECURITY_API_PREFIX = "/api/security"
APPROVED_OUTPASSES_PATH = f"{SECURITY_API_PREFIX}/outpasses/approved"  # GET
ACTIVE_OUTPASSES_PATH = f"{SECURITY_API_PREFIX}/outpasses/active"  # GET
OUTPASS_PATH = f"{SECURITY_API_PREFIX}/outpass/{{outpass_id}}"  # GET
DEPARTURE_PATH = f"{SECURITY_API_PREFIX}/outpass/{{outpass_id}}/departure"  # PUT
RETURN_PATH = f"{SECURITY_API_PREFIX}/outpass/{{outpass_id}}/return"  # PUT
TODAY_ACTIVITY_PATH = f"{SECURITY_API_PREFIX}/today"  # GET

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

# Reasons for HTTP status codes surfaced to officers
STATUS_REASONS = {
    400: "Bad request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not found",
    409: "Conflict (outpass already updated)",
    429: "Rate limit exceeded",
    500: "Internal server error",
    502: "Bad gateway (server error)",
    503: "Service unavailable",
    504: "Gateway timeout",
}
