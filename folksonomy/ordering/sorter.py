import random
from typing import Iterable, List, Optional

from folksonomy.models import OrderingType, TagCount


def sort_tags(
    tag_data: Iterable[TagCount],
    order: OrderingType,
    rng: Optional[random.Random] = None
) -> List[TagCount]:
    """
    Return a new list of tags arranged by ``order``.

    Sorting is stable, so tags with equal keys keep their input order.
    BALANCED sorts ascending, then lays out the even positions forward and the
    odd positions backward, which pushes the extremes out to both ends.

    Args:
        tag_data: Tags to arrange. Never mutated.
        order (OrderingType): Arrangement strategy.
        rng (Optional[random.Random]): Source of randomness for RANDOM.

    Returns:
        List[TagCount]
    """
    items = list(tag_data)

    if order == OrderingType.ALPHABETIC:
        return sorted(items, key=lambda x: x.tag)

    if order == OrderingType.ASCENDING:
        return sorted(items, key=lambda x: x.count)

    if order == OrderingType.DESCENDING:
        return sorted(items, key=lambda x: -x.count)

    if order == OrderingType.BALANCED:
        ordered = sorted(items, key=lambda x: x.count)
        return ordered[0::2] + ordered[1::2][::-1]

    if order == OrderingType.RANDOM:
        (rng or random).shuffle(items)
        return items

    return items


def select_top_n(tag_data: Iterable[TagCount], top_n_items: int) -> List[TagCount]:
    """Keep the ``top_n_items`` most used tags, largest first; ≤ 0 keeps everything as is."""
    if top_n_items > 0:
        return sort_tags(tag_data, OrderingType.DESCENDING)[:top_n_items]
    return list(tag_data)


def prepare_tags(
    tag_data: Iterable[TagCount],
    order: OrderingType,
    top_n_items: int,
    rng: Optional[random.Random] = None
) -> List[TagCount]:
    items = select_top_n(tag_data, top_n_items)

    # Top-N already leaves the items in descending order
    if order == OrderingType.NONE or (top_n_items > 0 and order == OrderingType.DESCENDING):
        return items

    return sort_tags(items, order, rng)
