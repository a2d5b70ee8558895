# constants.py
"""
Application-level constants.

These values are static and do not change between runs. They cover the
rendering framework (frame rate, window colors, card chrome) and the
built-in effect presets used when the config file does not provide its own
list of cards.
"""

# Visualization settings
FPS = 60
BACKGROUND_COLOR = (17, 17, 17) # Near black
CARD_WIDTH = 256
CARD_HEIGHT = 288
CARD_MARGIN = 24
CARD_BORDER_WIDTH = 1
CARD_BORDER_COLOR = (107, 114, 128) # Gray 500
CARD_TEXT_COLOR = (107, 114, 128)
CARD_LABEL_FONT_SIZE = 40

# Easing values closer than this to a bound are snapped onto it.
EASING_SNAP_EPSILON = 1e-9

# Default engine options for a single card. Every preset below and every
# entry in config.json is merged on top of these.
DEFAULT_EFFECT_OPTIONS = {
    "cell_size": 50,
    "gap_size": 0,
    "grid_cells": 50,
    "square_size": 25,
    "min_point_fade_speed": 4,
    "max_point_fade_speed": 6,
    "point_fade_speed_factor": 0.01,
    "card_speed_factor": 0.065,
    "fade_speed_factor": 0.04,
    "colors": [
        (255, 255, 255),
        (255, 0, 0),
    ],
    "seed": None,
}

# Keys that only affect how a card is drawn. They are split off before the
# engine configuration is built.
PRESENTATION_KEYS = ("label", "text_color_hover", "border_color_hover")

# The four demo cards shown when config.json has no "effects" list.
CARD_PRESETS = [
    {
        "min_point_fade_speed": 2,
        "max_point_fade_speed": 4,
        "colors": [(255, 255, 255), (155, 155, 155)],
        "label": "PC",
        "text_color_hover": (255, 255, 255),
        "border_color_hover": (255, 255, 255),
    },
    {
        "min_point_fade_speed": 2,
        "max_point_fade_speed": 4,
        "grid_cells": 20,
        "gap_size": 20,
        "cell_size": 30,
        "square_size": 10,
        "colors": [(80, 150, 240), (155, 155, 155), (255, 255, 255)],
        "label": "MOD",
        "text_color_hover": (147, 197, 253),   # Blue 300
        "border_color_hover": (147, 197, 253),
    },
    {
        "min_point_fade_speed": 1,
        "max_point_fade_speed": 3,
        "colors": [(255, 192, 33), (250, 220, 120)],
        "label": "WIN",
        "text_color_hover": (234, 179, 8),     # Yellow 500
        "border_color_hover": (234, 179, 8),
    },
    {
        "min_point_fade_speed": 1,
        "max_point_fade_speed": 3,
        "colors": [(255, 33, 33), (255, 120, 120)],
        "label": "PLAY",
        "text_color_hover": (239, 68, 68),     # Red 500
        "border_color_hover": (239, 68, 68),
    },
]
