# Environment variables
ENV_TIMEOUT = "RESTPIPE_TIMEOUT"
ENV_FOLLOW_REDIRECTS = "RESTPIPE_FOLLOW_REDIRECTS"
ENV_LOGGING_ENABLED = "RESTPIPE_LOGGING_ENABLED"
ENV_DEBUG = "RESTPIPE_DEBUG"

# Defaults
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_MIME_TYPE = "application/octet-stream"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"

# Multipart
MULTIPART_FILE_FIELD = "file"
MULTIPART_BOUNDARY_PREFIX = "Boundary+"

# Messages
NO_CONNECTIVITY_REASON = "no connectivity"
SERVER_ERROR_REASON = "server error"

LOGGER_NAME = "restpipe"
