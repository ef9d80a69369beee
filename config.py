import os

KANJIAPI_BASE_URL = "https://kanjiapi.dev/v1/"

# Seconds before the transport gives up on kanjiapi.dev
REQUEST_TIMEOUT = float(os.getenv("KANJIAPI_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("KANJIAPI_LOG_LEVEL", "WARNING")
