"""
Energy type palette.

Static lookup tables from an energy/Pokémon type name to a display colour
(RGB, 0.0-1.0 per channel) and an icon key. Lookups are case-insensitive and
accept the video-game aliases (electric, dark, steel, normal).
"""

RGB = tuple[float, float, float]

GRAYSCALE_5: RGB = (0.35, 0.35, 0.35)
GRAYSCALE_6: RGB = (0.55, 0.55, 0.55)

DEFAULT_COLOR: RGB = GRAYSCALE_6
DEFAULT_ICON = "circle.fill"

_ALIASES: dict[str, str] = {
    "electric": "lightning",
    "dark": "darkness",
    "steel": "metal",
    "normal": "colorless",
}

TYPE_COLORS: dict[str, RGB] = {
    "fire": (0.8, 0.2, 0.1),
    "water": (0.1, 0.6, 0.8),
    "grass": (0.2, 0.7, 0.1),
    "lightning": (0.9, 0.7, 0.0),
    "psychic": (0.4, 0.2, 0.8),
    "fighting": (0.8, 0.4, 0.1),
    "darkness": GRAYSCALE_5,
    "metal": GRAYSCALE_6,
    "fairy": (0.8, 0.3, 0.7),
    "dragon": (0.3, 0.2, 0.8),
    "colorless": GRAYSCALE_6,
    "ground": (0.6, 0.4, 0.1),
    "rock": (0.5, 0.4, 0.2),
    "bug": (0.4, 0.6, 0.1),
    "ghost": (0.4, 0.2, 0.6),
    "ice": (0.3, 0.7, 0.9),
    "flying": (0.4, 0.6, 0.9),
    "poison": (0.6, 0.2, 0.6),
}

TYPE_ICONS: dict[str, str] = {
    "fire": "flame.circle.fill",
    "water": "drop.circle.fill",
    "grass": "leaf.circle.fill",
    "lightning": "bolt.circle.fill",
    "psychic": "eye.circle.fill",
    "fighting": "fist.raised.circle.fill",
    "darkness": "moon.circle.fill",
    "metal": "gear.circle.fill",
    "fairy": "sparkle",
    "dragon": "hurricane.circle.fill",
    "colorless": "star.circle.fill",
    "ground": "mountain.2.circle.fill",
    "rock": "cube.fill",
    "bug": "ant.circle.fill",
    "ghost": "eye.trianglebadge.exclamationmark",
    "ice": "snowflake.circle.fill",
    "flying": "cloud.circle.fill",
    "poison": "drop.triangle.fill",
}


def _normalize_type(type_name: str) -> str:
    key = type_name.strip().lower()
    return _ALIASES.get(key, key)


def color_for_type(type_name: str) -> RGB:
    """Display colour for a type, grey for unknown types."""
    return TYPE_COLORS.get(_normalize_type(type_name), DEFAULT_COLOR)


def icon_for_type(type_name: str) -> str:
    """Icon key for a type, a plain circle for unknown types."""
    return TYPE_ICONS.get(_normalize_type(type_name), DEFAULT_ICON)
