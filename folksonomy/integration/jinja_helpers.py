from functools import partial
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from folksonomy.config.defaults import DEFAULT_PAGE_TEMPLATE, DEFAULT_PAGE_TITLE, TEMPLATE_DIR
from folksonomy.config.profile_loader import RenderProfile
from folksonomy.helpers.renderers import heat_map, tag_cloud, tag_index
from folksonomy.models import TagCount, UrlGenerator
from folksonomy.utils.logger import get_logger

WIDGETS = ("index", "cloud", "heatmap")


def register_helpers(env: Environment, url_generator: Optional[UrlGenerator] = None) -> Environment:
    """
    Expose the tag widgets as template globals.

    With ``url_generator`` bound, templates call ``tag_cloud(tags)``;
    otherwise they pass it themselves: ``tag_cloud(tags, url_for_tag)``.
    """
    helpers = {
        "tag_index": tag_index,
        "tag_cloud": tag_cloud,
        "heat_map": heat_map,
    }
    for name, helper in helpers.items():
        if url_generator is not None:
            helper = partial(_call_with_urls, helper, url_generator)
        env.globals[name] = helper
    return env


def _call_with_urls(helper, url_generator, tag_data, config=None, **options):
    return helper(tag_data, url_generator, config, **options)


def create_environment(template_dir: Path = TEMPLATE_DIR) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(['html', 'xml'])
    )


def generate_tag_page(
    output_html: Path,
    tag_data: Iterable[TagCount],
    url_generator: UrlGenerator,
    widgets: Sequence[str] = WIDGETS,
    profile: Optional[RenderProfile] = None,
    title: str = DEFAULT_PAGE_TITLE,
    logger=None
) -> Path:
    """
    Render a standalone HTML page showing the selected widgets.

    Args:
        output_html (Path): Where to write the page.
        tag_data (Iterable[TagCount]): Tags to show.
        url_generator (UrlGenerator): Maps a tag to its link target.
        widgets (Sequence[str]): Any of "index", "cloud", "heatmap", in page order.
        profile (Optional[RenderProfile]): Per-widget options.
        title (str): Page title.

    Returns:
        Path: The written file.
    """
    logger = logger or get_logger()
    profile = profile or RenderProfile()
    tags: List[TagCount] = list(tag_data)

    unknown = [w for w in widgets if w not in WIDGETS]
    if unknown:
        raise ValueError(f"[TagPage] Unknown widgets: {unknown}")

    env = register_helpers(create_environment(), url_generator)
    template = env.get_template(DEFAULT_PAGE_TEMPLATE)

    rendered = template.render(
        title=title,
        tags=tags,
        widgets=list(widgets),
        profile=profile,
    )

    output_html.parent.mkdir(parents=True, exist_ok=True)
    output_html.write_text(rendered, encoding="utf-8")
    logger.info(f"[✓] Tag page saved to: {output_html.resolve()}")
    return output_html
