from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Tuple

# Turns a tag into the href its link points at.
UrlGenerator = Callable[[str], str]


class OrderingType(str, Enum):
    NONE = "none"
    ALPHABETIC = "alphabetic"
    ASCENDING = "ascending"
    DESCENDING = "descending"
    BALANCED = "balanced"
    RANDOM = "random"


class Scaling(str, Enum):
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"


class ColourCorrelation(str, Enum):
    INDEX = "index"
    COUNT = "count"


@dataclass(frozen=True)
class TagCount:
    tag: str
    count: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TagCount":
        return cls(tag=str(data.get("tag", "")), count=int(data.get("count", 0)))


def count_range(tag_data: Iterable[TagCount]) -> Tuple[int, int]:
    """
    Find the smallest and largest count in a single pass.

    Returns:
        Tuple[int, int]: (min_count, max_count); (0, 0) for no data.
    """
    min_count = None
    max_count = None

    for ctu in tag_data:
        if min_count is None or ctu.count < min_count:
            min_count = ctu.count
        if max_count is None or ctu.count > max_count:
            max_count = ctu.count

    if min_count is None:
        return 0, 0
    return min_count, max_count
