"""Configuration constants for activity heatmap rendering."""

from reportlab.lib import colors

# 51 full weeks plus the current (possibly partial) week.
WEEK_COLUMNS = 52
FULL_WEEKS = WEEK_COLUMNS - 1
DAYS_PER_WEEK = 7

# Layout
# Share of the width given to cells, in percent; the rest goes to the gaps.
ITEMS_WIDTH_PERCENT = 70
HEADER_PADDING_DP = 6
TEXT_SIZE_SP = 14
# Probe covering both ascender and descender extremes of the label font.
TEXT_PROBE = "Ttpqyjg"

# File output
DEFAULT_WIDTH = 700
DEFAULT_FILENAME_TEMPLATE = "activity_{end}.pdf"

# Month labels above the grid
MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


class Theme:
    """Color and font choices for rendering."""

    ENABLED = colors.HexColor("#41D83C")
    DISABLED = colors.HexColor("#ECECEC")
    TEXT = colors.HexColor("#5F5F5F")
    BACKGROUND = colors.white

    FONT_REGULAR = "Helvetica"
    TEXT_SIZE = TEXT_SIZE_SP
