"""
Application-level constants for hardcoded business logic.

These values represent core application behavior and should NEVER be changed
via environment variables or configuration.

For configurable values (application name, admin role, database pool, etc.),
see author_api/settings.py where values can be overridden via environment
variables.
"""

# ============================================================================
# Alert Header Contract
# ============================================================================

# Entity kind reported in alert headers for the author resource
AUTHOR_ENTITY_NAME = "author"

# Error key sent when a create request already carries an identity
ID_EXISTS_ERROR_KEY = "idexists"


# ============================================================================
# Logging Limits
# ============================================================================

# Maximum size (bytes) of a single structured JSON log line
# Longer messages are truncated before being written
MAX_LOG_SIZE_BYTES = 250000

# Correlation ids are cut to this many characters
CORRELATION_ID_LENGTH = 8
