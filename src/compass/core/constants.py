"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Card fields
MAX_TENANT_ID_LENGTH = 255
MAX_USER_ID_LENGTH = 255
MAX_MIME_TYPE_LENGTH = 255

# Ordering: a tenant with no cards behaves as if its highest order were -1
EMPTY_MAX_ORDER = -1

# Themes
MAX_THEME_NAME_LENGTH = 255
DEFAULT_THEME_NAME = "Custom Theme"

# Card presentation
UNTITLED_CARD_TITLE = "Untitled"

# Uploads
MAX_IMAGE_UPLOAD_BYTES = 10 * 1024 * 1024  # 10 MB
MAX_VIDEO_UPLOAD_BYTES = 50 * 1024 * 1024  # 50 MB
DEFAULT_BLOB_PATH_PREFIX = "compass-banners"

# Platform access levels
ACCESS_LEVEL_ADMIN = "admin"
ACCESS_LEVEL_CUSTOMER = "customer"
ACCESS_LEVEL_NONE = "no_access"

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"
