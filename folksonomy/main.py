import sys
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote

from folksonomy.cli import parse_args
from folksonomy.config.profile_loader import RenderProfile, load_render_profile
from folksonomy.data.tag_loader import load_tag_counts
from folksonomy.errors import FolksonomyError
from folksonomy.integration.jinja_helpers import generate_tag_page
from folksonomy.models import UrlGenerator
from folksonomy.utils.logger import init_logging


def url_generator_for(pattern: str) -> UrlGenerator:
    def generate(tag: str) -> str:
        return pattern.replace("{tag}", quote(tag, safe=""))
    return generate


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    log_path = Path(args.log_file) if args.log_file else None
    logger = init_logging(verbose=args.verbose, log_path=log_path)

    try:
        tag_data = load_tag_counts(Path(args.input))
        profile = load_render_profile(Path(args.profile)) if args.profile else RenderProfile()
        generate_tag_page(
            Path(args.output),
            tag_data,
            url_generator_for(args.url_pattern),
            widgets=args.widget,
            profile=profile,
            title=args.title,
            logger=logger,
        )
    except (OSError, ValueError, FolksonomyError) as ex:
        logger.error(f"[✗] Failed to generate tag page: {ex}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
