from dataclasses import dataclass
from typing import List, Sequence

from folksonomy.config.defaults import HEAT_MAP_HUE_SPAN
from folksonomy.models import ColourCorrelation, TagCount, count_range
from folksonomy.visual.colour import HSLColor


@dataclass(frozen=True)
class HeatStyle:
    colour: HSLColor
    width: float

    @property
    def css(self) -> str:
        return f"background: {self.colour.to_hex_rgb_string()}; width: {int(self.width)}%"


def heat_styles(
    tag_data: Sequence[TagCount],
    correlation: ColourCorrelation,
    saturation: float,
    luminance: float,
    taper_width: bool,
    min_width_percentage: int
) -> List[HeatStyle]:
    """
    Colour and width for each tag of a heat map, in the order given.

    COUNT correlation places each tag on the gradient by where its count sits
    between the smallest and largest count. INDEX correlation steps evenly down
    the list, which is expected to be sorted by descending count already.

    Args:
        tag_data (Sequence[TagCount]): Tags to style.
        correlation (ColourCorrelation): What drives hue and width.
        saturation (float): Fixed saturation for every item.
        luminance (float): Fixed luminance for every item.
        taper_width (bool): Shrink less used tags towards ``min_width_percentage``.
        min_width_percentage (int): Width of the least used tag when tapering.

    Returns:
        List[HeatStyle]
    """
    if not tag_data:
        return []

    width_range = 100 - min_width_percentage

    if correlation == ColourCorrelation.COUNT:
        min_count, max_count = count_range(tag_data)
        spread = max_count - min_count
        styles = []
        for ctu in tag_data:
            ratio = (ctu.count - min_count) / spread if spread else 0.0
            width = min_width_percentage + width_range * ratio if taper_width else 100
            hue = HEAT_MAP_HUE_SPAN - HEAT_MAP_HUE_SPAN * ratio
            styles.append(HeatStyle(HSLColor(hue, saturation, luminance), width))
        return styles

    gradations = len(tag_data)
    step_hue = HEAT_MAP_HUE_SPAN / gradations
    step_width = width_range / gradations
    return [
        HeatStyle(
            HSLColor(step_hue * index, saturation, luminance),
            100 - step_width * index if taper_width else 100
        )
        for index in range(gradations)
    ]
