import colorsys
from typing import Tuple


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class HSLColor:
    """
    Colour in hue/saturation/luminance space.

    Hue is stored as a fraction of the full wheel (0-1, not 0-360 degrees)
    and wraps around; saturation and luminance are clamped to 0-1.
    """

    def __init__(self, hue: float = 0.0, saturation: float = 1.0, luminance: float = 0.5):
        self.hue = hue
        self.saturation = saturation
        self.luminance = luminance

    @property
    def hue(self) -> float:
        return self._hue

    @hue.setter
    def hue(self, value: float):
        self._hue = value % 1.0

    @property
    def saturation(self) -> float:
        return self._saturation

    @saturation.setter
    def saturation(self, value: float):
        self._saturation = _clamp(value)

    @property
    def luminance(self) -> float:
        return self._luminance

    @luminance.setter
    def luminance(self, value: float):
        self._luminance = _clamp(value)

    def to_rgb(self) -> Tuple[int, int, int]:
        # colorsys orders the arguments hue, lightness, saturation
        r, g, b = colorsys.hls_to_rgb(self.hue, self.luminance, self.saturation)
        return round(r * 255), round(g * 255), round(b * 255)

    def to_hex_rgb_string(self) -> str:
        return "#{:02X}{:02X}{:02X}".format(*self.to_rgb())

    def __repr__(self) -> str:
        return f"HSLColor(hue={self.hue!r}, saturation={self.saturation!r}, luminance={self.luminance!r})"
