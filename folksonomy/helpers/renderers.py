"""
Template helpers that turn tag usage counts into HTML widgets.

Each helper takes the tags, a callable that maps a tag to its URL and an
optional config object; keyword options override the config. Empty input
renders as empty markup. Output is ``markupsafe.Markup`` so templates can
insert it without escaping it again.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from markupsafe import Markup

from folksonomy.config import defaults
from folksonomy.config.render_config import CloudConfig, HeatMapConfig, IndexConfig, build_config
from folksonomy.errors import UnsupportedVariantError
from folksonomy.markup import builder
from folksonomy.models import OrderingType, TagCount, UrlGenerator, count_range
from folksonomy.ordering.sorter import prepare_tags, select_top_n, sort_tags
from folksonomy.scaling.weights import compute_step, weight_class, weight_for
from folksonomy.utils.logger import get_logger
from folksonomy.visual.heat import heat_styles

logger = get_logger()


def _materialize(tag_data: Optional[Iterable[TagCount]]) -> List[TagCount]:
    return list(tag_data) if tag_data is not None else []


def tag_index(
    tag_data: Optional[Iterable[TagCount]],
    url_generator: UrlGenerator,
    config: Optional[IndexConfig] = None,
    **options: Any
) -> Markup:
    """Plain list of tag links, each followed by its count in brackets."""
    items = _materialize(tag_data)
    if not items:
        return Markup("")

    cfg = build_config(IndexConfig, config, options)
    items = prepare_tags(items, cfg.order, cfg.top_n_items)

    ul = builder.tag_list(cfg.control_id, defaults.INDEX_CSS_CLASS)
    for ctu in items:
        li = builder.list_item(ul)
        builder.tag_link(li, url_generator(ctu.tag), ctu.tag)
        builder.count_label(li, ctu.count)

    logger.debug(f"[TagIndex] Rendered {len(items)} tags into #{cfg.control_id}")
    return builder.to_markup(ul)


def tag_cloud(
    tag_data: Optional[Iterable[TagCount]],
    url_generator: UrlGenerator,
    config: Optional[CloudConfig] = None,
    **options: Any
) -> Markup:
    """
    Tag links carrying a ``weightN`` CSS class, N running from 1 (least used)
    to ``gradations`` (most used). The stylesheet decides what each weight looks like.
    """
    items = _materialize(tag_data)
    if not items:
        return Markup("")

    cfg = build_config(CloudConfig, config, options)
    items = prepare_tags(items, cfg.order, cfg.top_n_items)

    min_count, max_count = count_range(items)
    step = compute_step(min_count, max_count, cfg.scaling, cfg.gradations)

    ul = builder.tag_list(cfg.control_id, defaults.CLOUD_CSS_CLASS)
    for ctu in items:
        weight = weight_for(ctu.count, min_count, cfg.scaling, step)
        li = builder.list_item(ul)
        builder.tag_link(li, url_generator(ctu.tag), ctu.tag, weight_class(weight))

    logger.debug(
        f"[TagCloud] Rendered {len(items)} tags into #{cfg.control_id} "
        f"({cfg.scaling.value}, counts {min_count}-{max_count}, step {step:.3f})"
    )
    return builder.to_markup(ul)


def heat_map(
    tag_data: Optional[Iterable[TagCount]],
    url_generator: UrlGenerator,
    config: Optional[HeatMapConfig] = None,
    **options: Any
) -> Markup:
    """
    Bars running from red (most used) to pale blue (least used), optionally
    tapering in width, always listed by descending count.
    """
    items = _materialize(tag_data)
    if not items:
        return Markup("")

    cfg = build_config(HeatMapConfig, config, options)
    items = select_top_n(sort_tags(items, OrderingType.DESCENDING), cfg.top_n_items)

    styles = heat_styles(
        items,
        cfg.colour_correlation,
        cfg.saturation,
        cfg.luminance,
        cfg.taper_width,
        cfg.min_width_percentage,
    )

    ul = builder.tag_list(cfg.control_id, defaults.HEAT_MAP_CSS_CLASS)
    for ctu, style in zip(items, styles):
        li = builder.list_item(ul, style.css)
        builder.tag_link(li, url_generator(ctu.tag), ctu.tag)
        if cfg.show_count:
            builder.heat_map_count(li, ctu.count)

    logger.debug(
        f"[HeatMap] Rendered {len(items)} tags into #{cfg.control_id} "
        f"(by {cfg.colour_correlation.value})"
    )
    return builder.to_markup(ul)


@dataclass(frozen=True)
class UnsupportedVariant:
    """
    Stand-in for a widget that has no implementation.

    It is falsy so callers can test for it, and refuses to become markup so a
    template that tries to print it fails loudly instead of showing nothing.
    """
    name: str
    reason: str

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        raise UnsupportedVariantError(f"[{self.name}] {self.reason}")

    def __html__(self) -> str:
        raise UnsupportedVariantError(f"[{self.name}] {self.reason}")


UNSUPPORTED_PARALLEL_TAG_CLOUD = UnsupportedVariant(
    name="ParallelTagCloud",
    reason="Parallel tag clouds are not supported",
)


def parallel_tag_cloud(*args: Any, **kwargs: Any) -> UnsupportedVariant:
    logger.warning("[ParallelTagCloud] Requested, but this widget is not supported")
    return UNSUPPORTED_PARALLEL_TAG_CLOUD
