"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

FIELD_SEPARATOR = "\t"
LINE_SEPARATOR = "\n"

# Minimum tab-delimited fields per layout
MIN_FIELDS = 2
LOG_TYPE_MIN_FIELDS = 8

# Fixed AUB columns around the direction flag
AUB_COLUMN_3 = "1"
AUB_COLUMN_5 = "1"
AUB_COLUMN_6 = "0"

# extras starts at raw field 2
EXTRAS_LOG_TYPE_INDEX = 4
LOG_TYPE_COLUMN_INDEX = 3

NOON_HOUR = 12
DEFAULT_TIME_PART = "00:00:00"

DOWNLOAD_FILENAME = "converted_aub_format.txt"
DOWNLOAD_MIMETYPE = "text/plain"
DEFAULT_ALLOWED_EXTENSIONS = frozenset({".txt"})
DEFAULT_MAX_UPLOAD_MB = 16

# Worst case url-encoded download form bytes per uploaded byte: "a\tb\n"
# becomes "a%09b%091%090%091%090%0D%0A", 27 bytes for 4
DOWNLOAD_FORM_EXPANSION = 8
