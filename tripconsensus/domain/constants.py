"""Domain constants shared by deterministic logic."""

import datetime as dt

# Calendar dates are pinned to this time of day so that day arithmetic never
# crosses a midnight boundary.
NOON = dt.time(12, 0)

DEFAULT_TOP_VIBES = 3

# Tried in order; the first separator found in a token wins.
RANGE_SEPARATORS = (" to ", " - ")

TOKEN_LIST_SEPARATOR = ";"
