"""Pure data: palette, layout and spring defaults.

No library imports — plain dicts that style.py, the spring layer and the
legend key read from.
"""

COLORS = {
    "bg": "#EBE1C3",
    "text": "#2B2B2B",
    "muted": "#6B6860",
    "accent": "#2E4D37",
    "surface": "#E4DAB9",
    "border": "#C4B892",
}

# One color per spring series, forest green first
COLOR_CYCLE = [
    COLORS["accent"],
    "#A0522D",  # sienna
    "#A26200",  # amber
    "#D1064F",  # magenta
    "#7021FF",  # purple
    "#496D00",  # olive
]

FONTS = {
    "sans": ["Helvetica Neue", "Arial", "DejaVu Sans", "sans-serif"],
}

# Springs are drawn in data units, so charts default to a square canvas
LAYOUT = {
    "figsize": (6.0, 6.0),
    "dpi": 80,
    "title_size": 14,
    "label_size": 11,
    "tick_size": 9,
    "spine_width": 0.8,
    "margin": 0.08,           # room for the coil radius around the endpoints
    "legend_alpha": 0.9,
    "legend_key_length": 3.0,  # in font sizes; wide enough to show a few turns
    "legend_key_height": 1.2,
}

# Spring shape defaults, used wherever a row or call leaves them unset
SPRING = {
    "diameter": 1.0,
    "tension": 0.75,
    "n": 50,              # points per revolution
    "tension_range": (0.1, 1.0),
    "line_width": 1.0,
    "capstyle": "round",
    "joinstyle": "round",
    "key_revolutions": 3.0,
    "key_n": 24,
}
