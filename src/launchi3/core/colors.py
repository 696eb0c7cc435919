"""Window class to LED color resolution."""

from launchi3.models import AppConfig, Color


def resolve(window_class: str, config: AppConfig) -> Color:
    """
    Look up the color for a window class.

    Matching is exact and case-sensitive ("firefox" does not match
    "Firefox"). Unknown classes get ``config.default_color``.
    """
    return config.colors.get(window_class, config.default_color)
