"""Editor font catalog.

The font menu offers a fixed list of monospace and Korean-capable
families. The system font registry is not queried.
"""

SYSTEM_FONTS: tuple[str, ...] = (
    "Consolas",
    "Courier New",
    "Lucida Console",
    "Monaco",
    "Menlo",
    "Source Code Pro",
    "Fira Code",
    "Roboto Mono",
    "Ubuntu Mono",
    "Nanum Gothic Coding",
    "D2Coding",
    "Noto Sans KR",
)


def get_system_fonts() -> list[str]:
    """Return the font catalog as a new list."""
    return list(SYSTEM_FONTS)
