"""Palette and hover tint helper for the LernDeutsch UI."""


class HomeColors:
    """Light theme palette."""

    BG_TOP = "#f3f0ff"
    BG_MIDDLE = "#e4dcff"
    BG_BOTTOM = "#cfc2ff"

    PRIMARY = "#6c5ce7"
    PRIMARY_LIGHT = "#a29bfe"
    PRIMARY_DARK = "#4834d4"
    SECONDARY = "#00cec9"

    CARD_BG = "rgba(255, 255, 255, 0.85)"
    CARD_BG_HOVER = "rgba(255, 255, 255, 0.95)"
    CARD_BORDER = "rgba(255, 255, 255, 0.6)"

    TEXT_PRIMARY = "#2d3436"
    TEXT_SECONDARY = "#636e72"
    TEXT_MUTED = "#b2bec3"

    # Answer feedback
    SUCCESS = "#00b894"
    SUCCESS_BG = "#e6fff8"
    ERROR = "#ff7675"
    ERROR_BG = "#fff0f0"


def _rgb(color: str) -> tuple[int, int, int]:
    color = color.strip()
    if len(color) != 7 or color[0] != "#":
        raise ValueError(f"not a #RRGGBB color: {color!r}")
    return tuple(int(color[i:i + 2], 16) for i in (1, 3, 5))  # type: ignore[return-value]


def blend_hex(a: str, b: str, t: float) -> str:
    """Mix ``a`` towards ``b`` by ``t`` (clamped to 0..1).

    Returns ``a`` unchanged when either color cannot be parsed.
    """
    try:
        start, end = _rgb(a), _rgb(b)
        t = min(1.0, max(0.0, float(t)))
    except (TypeError, ValueError):
        return a.strip()
    mixed = (int(s + (e - s) * t) for s, e in zip(start, end))
    return "#" + "".join(f"{c:02X}" for c in mixed)
