# Postman API
BASE_URL = "https://api.getpostman.com"

# Environment variables
ENV_POSTMAN_API_KEY = "POSTMAN_API_KEY"
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"

DOTENV_FILE = ".env"

# Headers
HEADER_API_KEY = "X-API-Key"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_PREFER = "Prefer"

CONTENT_TYPE_JSON = "application/json"
PREFER_RESPOND_ASYNC = "respond-async"

# Client defaults
DEFAULT_TIMEOUT = 30.0
