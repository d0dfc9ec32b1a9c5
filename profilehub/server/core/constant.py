"""
Server-wide constants.
"""

PROJECT_NAME = "ProfileHub"

API_PREFIX = "/api"

API_VERSION = "1.0.0"

SCHEMA_VERSION = "v1"
