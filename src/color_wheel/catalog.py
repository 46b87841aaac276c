"""Static reference tables: named colors by category and curated schemes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class NamedColor:
    name: str
    hex: str
    rgb: str  # "r, g, b"

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "hex": self.hex, "rgb": self.rgb}


@dataclass(frozen=True)
class ColorScheme:
    name: str
    colors: tuple[str, ...]
    description: str
    category: str

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "colors": list(self.colors),
            "description": self.description,
            "category": self.category,
        }


def _colors(rows: Iterable[tuple[str, str, str]]) -> tuple[NamedColor, ...]:
    return tuple(NamedColor(*row) for row in rows)


BASIC_COLORS = _colors(
    [
        ("White", "#FFFFFF", "255, 255, 255"),
        ("Black", "#000000", "0, 0, 0"),
        ("Red", "#FF0000", "255, 0, 0"),
        ("Green", "#00FF00", "0, 255, 0"),
        ("Blue", "#0000FF", "0, 0, 255"),
        ("Yellow", "#FFFF00", "255, 255, 0"),
        ("Cyan", "#00FFFF", "0, 255, 255"),
        ("Magenta", "#FF00FF", "255, 0, 255"),
    ]
)

COLOR_CATEGORIES: dict[str, tuple[NamedColor, ...]] = {
    "Reds": _colors(
        [
            ("Red", "#FF0000", "255, 0, 0"),
            ("Dark Red", "#8B0000", "139, 0, 0"),
            ("Light Pink", "#FFB6C1", "255, 182, 193"),
            ("Crimson", "#DC143C", "220, 20, 60"),
            ("Fire Brick", "#B22222", "178, 34, 34"),
            ("Tomato", "#FF6347", "255, 99, 71"),
            ("Coral", "#FF7F50", "255, 127, 80"),
            ("Indian Red", "#CD5C5C", "205, 92, 92"),
        ]
    ),
    "Blues": _colors(
        [
            ("Blue", "#0000FF", "0, 0, 255"),
            ("Sky Blue", "#87CEEB", "135, 206, 235"),
            ("Navy", "#000080", "0, 0, 128"),
            ("Royal Blue", "#4169E1", "65, 105, 225"),
            ("Turquoise", "#40E0D0", "64, 224, 208"),
            ("Deep Sky Blue", "#006994", "0, 105, 148"),
            ("Powder Blue", "#B0E0E6", "176, 224, 230"),
            ("Steel Blue", "#4682B4", "70, 130, 180"),
        ]
    ),
    "Greens": _colors(
        [
            ("Green", "#008000", "0, 128, 0"),
            ("Light Green", "#90EE90", "144, 238, 144"),
            ("Dark Green", "#006400", "0, 100, 0"),
            ("Olive", "#808000", "128, 128, 0"),
            ("Lime Green", "#32CD32", "50, 205, 50"),
            ("Forest Green", "#228B22", "34, 139, 34"),
            ("Sea Green", "#2E8B57", "46, 139, 87"),
            ("Mint Green", "#98FB98", "152, 251, 152"),
        ]
    ),
    "Yellows": _colors(
        [
            ("Yellow", "#FFFF00", "255, 255, 0"),
            ("Gold", "#FFD700", "255, 215, 0"),
            ("Light Yellow", "#FFFFE0", "255, 255, 224"),
            ("Lemon Chiffon", "#FFFACD", "255, 250, 205"),
            ("Dark Orange", "#FF8C00", "255, 140, 0"),
            ("Cornsilk", "#FFF8DC", "255, 248, 220"),
            ("Banana Yellow", "#FFEF96", "255, 239, 150"),
            ("Canary Yellow", "#FFFF99", "255, 255, 153"),
        ]
    ),
    "Oranges": _colors(
        [
            ("Orange", "#FFA500", "255, 165, 0"),
            ("Dark Orange", "#FF8C00", "255, 140, 0"),
            ("Orange Red", "#FF4500", "255, 69, 0"),
            ("Peach Puff", "#FFE4B5", "255, 228, 181"),
            ("Peach", "#FFCBA4", "255, 203, 164"),
            ("Peru", "#B87333", "184, 115, 51"),
            ("Coral", "#FF7F50", "255, 127, 80"),
            ("Pumpkin", "#FF7518", "255, 117, 24"),
        ]
    ),
    "Purples": _colors(
        [
            ("Purple", "#800080", "128, 0, 128"),
            ("Plum", "#DDA0DD", "221, 160, 221"),
            ("Indigo", "#4B0082", "75, 0, 130"),
            ("Dark Violet", "#4B0082", "75, 0, 130"),
            ("Dark Magenta", "#8B008B", "139, 0, 139"),
            ("Orchid", "#DA70D6", "218, 112, 214"),
            ("Violet", "#DDA0DD", "221, 160, 221"),
            ("Lavender", "#E6E6FA", "230, 230, 250"),
        ]
    ),
    "Pinks": _colors(
        [
            ("Pink", "#FFC0CB", "255, 192, 203"),
            ("Deep Pink", "#FF1493", "255, 20, 147"),
            ("Light Pink", "#FFB6C1", "255, 182, 193"),
            ("Fuchsia", "#FF00FF", "255, 0, 255"),
            ("Hot Pink", "#FF69B4", "255, 105, 180"),
            ("Light Coral", "#F08080", "240, 128, 128"),
            ("Medium Violet Red", "#C71585", "199, 21, 133"),
            ("Bright Pink", "#FF1493", "255, 20, 147"),
        ]
    ),
    "Grays": _colors(
        [
            ("Gray", "#808080", "128, 128, 128"),
            ("Light Gray", "#D3D3D3", "211, 211, 211"),
            ("Dark Gray", "#A9A9A9", "169, 169, 169"),
            ("Silver", "#C0C0C0", "192, 192, 192"),
            ("Dim Gray", "#696969", "105, 105, 105"),
            ("Dark Slate Gray", "#2F4F4F", "47, 79, 79"),
            ("White Smoke", "#F5F5F5", "245, 245, 245"),
            ("Charcoal", "#36454F", "54, 69, 79"),
        ]
    ),
    "Browns": _colors(
        [
            ("Brown", "#A52A2A", "165, 42, 42"),
            ("Tan", "#D2B48C", "210, 180, 140"),
            ("Dark Brown", "#654321", "101, 67, 33"),
            ("Chocolate", "#D2691E", "210, 105, 30"),
            ("Saddle Brown", "#8B4513", "139, 69, 19"),
            ("Beige", "#F5F5DC", "245, 245, 220"),
            ("Sandy Brown", "#F4A460", "244, 164, 96"),
            ("Coffee", "#6F4E37", "111, 78, 55"),
        ]
    ),
}


def _schemes(
    category: str, rows: Iterable[tuple[str, str, list[str]]]
) -> tuple[ColorScheme, ...]:
    return tuple(
        ColorScheme(name, tuple(colors), description, category)
        for name, description, colors in rows
    )


# fmt: off
COLOR_SCHEMES: dict[str, tuple[ColorScheme, ...]] = {
    "Tailwind CSS": _schemes("Tailwind CSS", [
        ("Tailwind Slate", "Cool grays with a subtle blue tint",
         ["#f8fafc", "#f1f5f9", "#e2e8f0", "#cbd5e1", "#94a3b8", "#64748b", "#475569", "#334155", "#1e293b", "#0f172a"]),
        ("Tailwind Gray", "Pure neutral grays",
         ["#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280", "#4b5563", "#374151", "#1f2937", "#111827"]),
        ("Tailwind Red", "Vibrant reds for errors and attention",
         ["#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444", "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d"]),
        ("Tailwind Blue", "Clean blues for primary actions",
         ["#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa", "#3b82f6", "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a"]),
        ("Tailwind Green", "Fresh greens for success states",
         ["#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80", "#22c55e", "#16a34a", "#15803d", "#166534", "#14532d"]),
        ("Tailwind Purple", "Rich purples for brand colors",
         ["#faf5ff", "#f3e8ff", "#e9d5ff", "#d8b4fe", "#c084fc", "#a855f7", "#9333ea", "#7c3aed", "#6d28d9", "#581c87"]),
    ]),
    "Material Design": _schemes("Material Design", [
        ("Material Red", "Google's Material Design red palette",
         ["#ffebee", "#ffcdd2", "#ef9a9a", "#e57373", "#ef5350", "#f44336", "#e53935", "#d32f2f", "#c62828", "#b71c1c"]),
        ("Material Pink", "Vibrant pink from Material Design",
         ["#fce4ec", "#f8bbd9", "#f48fb1", "#f06292", "#ec407a", "#e91e63", "#d81b60", "#c2185b", "#ad1457", "#880e4f"]),
        ("Material Purple", "Rich purple palette",
         ["#f3e5f5", "#e1bee7", "#ce93d8", "#ba68c8", "#ab47bc", "#9c27b0", "#8e24aa", "#7b1fa2", "#6a1b9a", "#4a148c"]),
        ("Material Deep Purple", "Deep purple tones",
         ["#ede7f6", "#d1c4e9", "#b39ddb", "#9575cd", "#7e57c2", "#673ab7", "#5e35b1", "#512da8", "#4527a0", "#311b92"]),
        ("Material Indigo", "Indigo blues for modern interfaces",
         ["#e8eaf6", "#c5cae9", "#9fa8da", "#7986cb", "#5c6bc0", "#3f51b5", "#3949ab", "#303f9f", "#283593", "#1a237e"]),
        ("Material Blue", "Classic Material blue",
         ["#e3f2fd", "#bbdefb", "#90caf9", "#64b5f6", "#42a5f5", "#2196f3", "#1e88e5", "#1976d2", "#1565c0", "#0d47a1"]),
    ]),
    "Flat Design": _schemes("Flat Design", [
        ("Flat UI Blues", "Clean flat design blues and grays",
         ["#ecf0f1", "#bdc3c7", "#3498db", "#2980b9", "#34495e", "#2c3e50"]),
        ("Flat UI Greens", "Natural flat design greens",
         ["#d5dbdb", "#a2d5ab", "#2ecc71", "#27ae60", "#16a085", "#1abc9c"]),
        ("Flat UI Reds", "Bold flat design reds",
         ["#fadbd8", "#f1948a", "#e74c3c", "#c0392b", "#a93226", "#922b21"]),
        ("Flat UI Oranges", "Warm flat design oranges and purples",
         ["#fdeaa7", "#fdcb6e", "#e17055", "#d63031", "#a29bfe", "#6c5ce7"]),
        ("Flat UI Yellows", "Sunny flat design yellows and oranges",
         ["#fff9c4", "#fdcb6e", "#f39c12", "#e67e22", "#d35400", "#a04000"]),
    ]),
    "Web Safe": _schemes("Web Safe", [
        ("Web Safe Grays", "Web-safe grayscale colors",
         ["#ffffff", "#cccccc", "#999999", "#666666", "#333333", "#000000"]),
        ("Web Safe Blues", "Web-safe blue palette",
         ["#e6f3ff", "#cce7ff", "#99d6ff", "#66c2ff", "#3399ff", "#0066cc"]),
        ("Web Safe Greens", "Web-safe green colors",
         ["#e6ffe6", "#ccffcc", "#99ff99", "#66ff66", "#33cc33", "#009900"]),
        ("Web Safe Reds", "Web-safe red palette",
         ["#ffe6e6", "#ffcccc", "#ff9999", "#ff6666", "#ff3333", "#cc0000"]),
        ("Primary Web Colors", "Basic web-safe primary colors",
         ["#ff0000", "#00ff00", "#0000ff", "#ffff00", "#ff00ff", "#00ffff", "#ffffff", "#000000"]),
    ]),
    "Accessibility": _schemes("Accessibility", [
        ("High Contrast", "High contrast colors for accessibility",
         ["#000000", "#ffffff", "#ffff00", "#0000ff", "#ff0000", "#00ff00"]),
        ("Color Blind Safe", "Colors distinguishable by color blind users",
         ["#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd", "#8c564b", "#e377c2", "#7f7f7f"]),
        ("WCAG AA Compliant", "Colors meeting WCAG AA contrast standards",
         ["#ffffff", "#f8f9fa", "#e9ecef", "#6c757d", "#495057", "#343a40", "#212529", "#000000"]),
    ]),
    "Trending 2024": _schemes("Trending 2024", [
        ("Digital Lavender", "Trending digital lavender tones",
         ["#f8f6ff", "#e8e2ff", "#d4c5ff", "#c0a8ff", "#ac8bff", "#986eff", "#8451ff", "#7034ff"]),
        ("Cyber Green", "Futuristic cyber green palette",
         ["#f0fff4", "#e6ffed", "#b3ffd1", "#80ffb5", "#4dff99", "#1aff7d", "#00e666", "#00cc55"]),
        ("Sunset Orange", "Warm sunset orange gradients",
         ["#fff8f0", "#fff0e6", "#ffdbcc", "#ffc6b3", "#ffb199", "#ff9c80", "#ff8766", "#ff724d"]),
        ("Ocean Blue", "Deep ocean blue tones",
         ["#f0f9ff", "#e0f2fe", "#bae6fd", "#7dd3fc", "#38bdf8", "#0ea5e9", "#0284c7", "#0369a1"]),
    ]),
}
# fmt: on


def all_colors() -> list[NamedColor]:
    out = list(BASIC_COLORS)
    for colors in COLOR_CATEGORIES.values():
        out.extend(colors)
    return out


def all_schemes() -> list[ColorScheme]:
    return [s for schemes in COLOR_SCHEMES.values() for s in schemes]


def search_colors(term: str = "", category: str | None = None) -> list[NamedColor]:
    """Colors whose name or hex contains ``term`` (case-insensitive)."""
    pool = list(COLOR_CATEGORIES.get(category, ())) if category else all_colors()
    needle = (term or "").strip().lower()
    if not needle:
        return pool
    return [c for c in pool if needle in c.name.lower() or needle in c.hex.lower()]


def search_schemes(term: str = "", category: str | None = None) -> list[ColorScheme]:
    pool = list(COLOR_SCHEMES.get(category, ())) if category else all_schemes()
    needle = (term or "").strip().lower()
    if not needle:
        return pool
    return [
        s
        for s in pool
        if needle in s.name.lower()
        or needle in s.description.lower()
        or needle in s.category.lower()
    ]


def slug(name: str) -> str:
    """'Tailwind Slate' -> 'tailwind-slate'."""
    return re.sub(r"\s+", "-", name.strip().lower())


def find_scheme(name: str) -> ColorScheme | None:
    """Look a scheme up by display name or by its slug."""
    key = slug(name or "")
    for s in all_schemes():
        if slug(s.name) == key:
            return s
    return None


__all__ = [
    "NamedColor",
    "ColorScheme",
    "BASIC_COLORS",
    "COLOR_CATEGORIES",
    "COLOR_SCHEMES",
    "all_colors",
    "all_schemes",
    "search_colors",
    "search_schemes",
    "find_scheme",
    "slug",
]
