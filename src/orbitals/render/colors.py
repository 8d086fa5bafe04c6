"""CSS-style colour strings as used by :class:`~orbitals.models.Palette`."""

from typing import Tuple

RGBA = Tuple[int, int, int, float]


def parse_color(text: str) -> RGBA:
    """Parse ``#rgb``, ``#rrggbb`` or ``rgba(r, g, b, a)`` into ``(r, g, b, alpha)``."""
    s = text.strip()
    if s.startswith("#"):
        digits = s[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            raise ValueError(f"Unsupported hex colour {text!r}")
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        return r, g, b, 1.0
    lowered = s.lower()
    if lowered.startswith("rgba(") and lowered.endswith(")"):
        parts = [p.strip() for p in s[5:-1].split(",")]
        if len(parts) != 4:
            raise ValueError(f"Expected four rgba() components in {text!r}")
        r, g, b = (int(p) for p in parts[:3])
        alpha = float(parts[3])
        if not all(0 <= c <= 255 for c in (r, g, b)) or not 0.0 <= alpha <= 1.0:
            raise ValueError(f"rgba() component out of range in {text!r}")
        return r, g, b, alpha
    raise ValueError(f"Unsupported colour {text!r}")


def hex_to_bgr(text: str) -> Tuple[int, int, int]:
    """OpenCV channel order; alpha is dropped."""
    r, g, b, _ = parse_color(text)
    return b, g, r


__all__ = ["RGBA", "parse_color", "hex_to_bgr"]
