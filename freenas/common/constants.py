"""Constants."""

REQUEST_TIMEOUT = 30
DATASETS_LIST_LIMIT = 1000

API_PREFIX = "/api/v1.0"
DEFAULT_URL = "http://localhost"

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204

URL_ENV_VAR = "FREENAS_URL"
USERNAME_ENV_VAR = "FREENAS_USERNAME"
PASSWORD_ENV_VAR = "FREENAS_PASSWORD"
DEFAULT_USERNAME = "root"
