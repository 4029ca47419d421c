"""Static settings for the catalog browser."""

CATALOG_URL = "https://raw.githubusercontent.com/d-a-s-h-o/stream/master/content.json"
REQUEST_TIMEOUT_SECONDS = 10

# Interactive view
VISIBLE_ITEMS = 10
INPUT_PLACEHOLDER = "Type to filter..."
INPUT_CHAR_LIMIT = 256
INPUT_WIDTH = 20
NAME_BASE_WIDTH = 20
NAME_WIDTH_STEP = 5
YEAR_WIDTH = 10
TYPE_WIDTH = 10
COMPACT_URLS = False

# 256-colour palette indexes, one per column
NAME_COLOR = "205"
YEAR_COLOR = "242"
TYPE_COLOR = "39"
URL_COLOR = "100"

# Link checker
LINK_CHECK_MODE = "sequential"
LINK_CHECK_DELAY_SECONDS = 0.01
MAX_LINK_WORKERS = 16
