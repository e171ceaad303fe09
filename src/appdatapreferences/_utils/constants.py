# Drive v2 endpoints
DRIVE_BASE_URL = "https://www.googleapis.com/drive/v2"
DRIVE_UPLOAD_BASE_URL = "https://www.googleapis.com/upload/drive/v2"

DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_TIMEOUT = 30.0

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"

# Environment variables
ENV_BASE_URL = "DRIVE_BASE_URL"
ENV_UPLOAD_BASE_URL = "DRIVE_UPLOAD_BASE_URL"
ENV_ACCESS_TOKEN = "DRIVE_ACCESS_TOKEN"
ENV_TIMEOUT = "DRIVE_TIMEOUT"
ENV_DEBUG = "DRIVE_DEBUG"

LOGGER_NAME = "appdatapreferences"
