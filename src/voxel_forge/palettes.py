"""
Palette Table

Closed sets of five-slot palettes keyed by object category. A generator
draws one palette at the start of a run and uses it for the whole model.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Tuple

from .color import is_hex_color
from .rng import SeededRNG


SLOTS = ("primary", "secondary", "accent", "detail", "dark")


@dataclass(frozen=True)
class Palette:
    """Five named colors used by one generated model."""

    name: str
    primary: str
    secondary: str
    accent: str
    detail: str
    dark: str

    def __post_init__(self):
        for slot in SLOTS:
            value = getattr(self, slot)
            if not is_hex_color(value):
                raise ValueError(f"Palette {self.name!r}: {slot} is not a hex color: {value!r}")

    @property
    def colors(self) -> Tuple[str, str, str, str, str]:
        """Slot colors in canonical order."""
        return (self.primary, self.secondary, self.accent, self.detail, self.dark)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


ROBOT_PALETTES: List[Palette] = [
    Palette("industrial", "#F2C94C", "#333333", "#EB5757", "#BDBDBD", "#1A1A1A"),
    Palette("sci-fi blue", "#2F80ED", "#E0E0E0", "#56CCF2", "#828282", "#1F2937"),
    Palette("military", "#4B5320", "#8B4513", "#F2994A", "#555555", "#222222"),
    Palette("neon punk", "#FF00FF", "#2D2D2D", "#00FFFF", "#FFFF00", "#000000"),
    Palette("rust bucket", "#A0522D", "#6B4226", "#FFB347", "#8C8C8C", "#2B1B12"),
]

SPACESHIP_PALETTES: List[Palette] = [
    Palette("rebel", "#D9D9D9", "#8C8C8C", "#E74C3C", "#F39C12", "#2C2C2C"),
    Palette("imperial", "#9EA7B0", "#5A6470", "#3498DB", "#D0D7DE", "#1B1F24"),
    Palette("corsair", "#2C3E50", "#C0392B", "#F1C40F", "#95A5A6", "#121212"),
    Palette("explorer", "#FFFFFF", "#2980B9", "#E67E22", "#BDC3C7", "#34495E"),
    Palette("nebula", "#6C3483", "#1ABC9C", "#F5B7B1", "#D2B4DE", "#17202A"),
]

ANIMAL_PALETTES: List[Palette] = [
    Palette("fox", "#D35400", "#F5F5F5", "#2C2C2C", "#A04000", "#1C1C1C"),
    Palette("forest", "#6E4B2A", "#A67C52", "#F2D16B", "#3E2A16", "#1E140B"),
    Palette("arctic", "#F4F6F7", "#AEB6BF", "#5DADE2", "#D5DBDB", "#2E4053"),
    Palette("jungle", "#27AE60", "#F1C40F", "#E74C3C", "#145A32", "#0B2E1A"),
    Palette("reef", "#1ABC9C", "#F39C12", "#FF6F91", "#117864", "#0E2F44"),
]

MONSTER_PALETTES: List[Palette] = [
    Palette("swamp", "#4D7C0F", "#365314", "#FACC15", "#A3E635", "#1A2E05"),
    Palette("abyss", "#312E81", "#6D28D9", "#22D3EE", "#A78BFA", "#0F0A2E"),
    Palette("inferno", "#B91C1C", "#7C2D12", "#FDE047", "#F97316", "#1C0A05"),
    Palette("bone", "#E7E5E4", "#A8A29E", "#DC2626", "#78716C", "#1C1917"),
    Palette("toxic", "#84CC16", "#581C87", "#F0ABFC", "#D9F99D", "#14051F"),
]

DEFAULT_PALETTES: List[Palette] = ROBOT_PALETTES

PALETTE_TABLE: Dict[str, List[Palette]] = {
    "robot": ROBOT_PALETTES,
    "spaceship": SPACESHIP_PALETTES,
    "animal": ANIMAL_PALETTES,
    "monster": MONSTER_PALETTES,
}


def palettes_for(category: str) -> List[Palette]:
    """Return the palette set for a category, or the default set."""
    return PALETTE_TABLE.get(category, DEFAULT_PALETTES)


def get_palette(category: str, rng: SeededRNG) -> Palette:
    """
    Draw a palette for a category.

    Args:
        category: Category tag ("robot", "spaceship", ...)
        rng: Stream to draw from (one draw)

    Returns:
        The selected Palette
    """
    return rng.choice(palettes_for(category))


def get_palette_by_name(name: str) -> Palette:
    """
    Look up a palette by name across all categories.

    Raises:
        KeyError: If no palette has that name
    """
    key = name.lower()
    for palettes in PALETTE_TABLE.values():
        for palette in palettes:
            if palette.name == key:
                return palette
    raise KeyError(f"Unknown palette: {name}")
