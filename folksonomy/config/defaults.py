from pathlib import Path

# ─── Directory Structure ─────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent         # → folksonomy/
TEMPLATE_DIR = BASE_DIR / "templates"                     # → folksonomy/templates

# ─── Markup ─────────────────────────────────────────────────
LINK_TITLE = "Blog posts for {0}"
LINK_REL = "tag"
WEIGHT_CLASS_PREFIX = "weight"

INDEX_CSS_CLASS = "tagIndex"
CLOUD_CSS_CLASS = "tagCloud"
HEAT_MAP_CSS_CLASS = "heatMap"
HEAT_MAP_COUNT_CSS_CLASS = "txHmTxt"
HEAT_MAP_TRIANGLE_CSS_CLASS = "txHmTri"

# ─── Control ids ────────────────────────────────────────────
DEFAULT_INDEX_ID = "tagIndex"
DEFAULT_CLOUD_ID = "tagCloud"
DEFAULT_HEAT_MAP_ID = "heatMap"

# ─── Widget Defaults ────────────────────────────────────────
DEFAULT_TOP_N_ITEMS = -1                                  # ≤ 0 means "all"
DEFAULT_GRADATIONS = 6
DEFAULT_SATURATION = 1.0
DEFAULT_LUMINANCE = 0.5
DEFAULT_MIN_WIDTH_PERCENTAGE = 50

# Hue is stored 0-1 rather than 0-360 degrees; the heat map uses half the
# wheel, from red (0) to pale blue (0.5).
HEAT_MAP_HUE_SPAN = 0.5

# ─── Page generation ────────────────────────────────────────
DEFAULT_PAGE_TEMPLATE = "tag_page.html"
DEFAULT_URL_PATTERN = "/tags/{tag}"
DEFAULT_PAGE_TITLE = "Tags"
