"""Application constants that never change across environments.

These are true constants representing physical facts, fixed reference points,
or fixed business identifiers that should never vary between dev/staging/prod.
"""

# ===== Geographic Constants =====
EARTH_RADIUS_KM = 6371  # Earth's radius in kilometers (for Haversine formula)

# Kaaba, Masjid al-Haram, Mecca
KAABA_LATITUDE = 21.4225
KAABA_LONGITUDE = 39.8262

DEGREES_IN_CIRCLE = 360.0
QIBLA_DECIMAL_PLACES = 2

# ===== AI Model Identifiers =====
MODEL_HUGGINGFACE_FALLBACK = "huggingface-fallback"
MODEL_KNOWLEDGE_BASE = "knowledge-base"

CONFIDENCE_HIGH = "high"
CONFIDENCE_MEDIUM = "medium"
CONFIDENCE_LOW = "low"
CONFIDENCE_LEVELS = (CONFIDENCE_HIGH, CONFIDENCE_MEDIUM, CONFIDENCE_LOW)

HUGGINGFACE_FALLBACK_NOTE = "Fallback model used - sources may be limited"

# ===== Data Source Identifiers =====
SOURCE_ALADHAN = "aladhan_api"
SOURCE_PRAYER_FALLBACK = "mock_fallback"

# ===== Prayer Names (order of the day) =====
PRAYER_NAMES = ("Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha")

# ===== Content Filters =====
CATEGORY_ALL = "all"

# ===== HTTP Status Codes (commonly used) =====
HTTP_BAD_REQUEST = 400
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_SERVER_ERROR = 500
HTTP_BAD_GATEWAY = 502
HTTP_SERVICE_UNAVAILABLE = 503
