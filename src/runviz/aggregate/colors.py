"""Series colors.

Each experiment's color comes from its position in the selection, rotating
the hue by the golden angle so neighbouring series stay far apart.
"""

HUE_STEP = 137.508
SATURATION = 70
LIGHTNESS = 50


def series_hue(index: int) -> float:
    """Hue in degrees [0, 360) for the series at this position."""
    return (index * HUE_STEP) % 360


def series_color(index: int) -> str:
    """CSS color for the series at this position.

    Examples:
        >>> series_color(0)
        'hsl(0.000, 70%, 50%)'
        >>> series_color(1)
        'hsl(137.508, 70%, 50%)'
    """
    return f"hsl({series_hue(index):.3f}, {SATURATION}%, {LIGHTNESS}%)"
