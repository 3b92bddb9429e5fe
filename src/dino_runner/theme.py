"""
theme.py: Day/night colour blending and animation frame helpers for renderers.
"""

from typing import Dict

DAY_COLORS = {
    "bg": "#f7f7f7",
    "ground": "#535353",
    "player": "#535353",
    "obstacle": "#535353",
    "text": "#535353",
}

NIGHT_COLORS = {
    "bg": "#000000",
    "ground": "#525252",
    "player": "#525252",
    "obstacle": "#525252",
    "text": "#ffffff",
}


def hex_to_rgb(color: str) -> tuple:
    value = int(color.lstrip("#"), 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def lerp_color(color1: str, color2: str, t: float) -> str:
    """Linear blend of two #rrggbb colours, t in [0, 1]."""
    r1, g1, b1 = hex_to_rgb(color1)
    r2, g2, b2 = hex_to_rgb(color2)
    r = round(r1 + (r2 - r1) * t)
    g = round(g1 + (g2 - g1) * t)
    b = round(b1 + (b2 - b1) * t)
    return "#{:06x}".format((r << 16) | (g << 8) | b)


def theme_colors(night_progress: float) -> Dict[str, str]:
    return {
        name: lerp_color(DAY_COLORS[name], NIGHT_COLORS[name], night_progress)
        for name in DAY_COLORS
    }


def run_frame(game_time: float, game_speed: float) -> int:
    """Leg animation frame (0 or 1); faster runs animate faster."""
    interval = max(60.0, 150.0 - game_speed / 6.0)
    return int(game_time // interval) % 2


def cloud_x(game_time: float, canvas_width: float, speed: float = 30.0) -> float:
    """Left edge of the drifting cloud; wraps 100px past both edges."""
    return (game_time * speed / 1000.0) % (canvas_width + 100) - 100
