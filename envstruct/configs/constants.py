"""
envstruct Constants

Static values that rarely change: Go type markers, the struct-tag key
consulted for environment names, and supported file extensions.
"""

# --- Go Type Markers ---

POINTER_MARKER = "*"
SLICE_MARKER = "[]"

# --- Struct Tags ---

ENV_TAG_KEY = "env"
RAW_TAG_QUOTE = "`"

# --- Languages ---

EXTENSION_TO_LANGUAGE = {
    ".go": "go",
}
