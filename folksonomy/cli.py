import argparse
from typing import List, Optional

from folksonomy.config.defaults import DEFAULT_PAGE_TITLE, DEFAULT_URL_PATTERN
from folksonomy.integration.jinja_helpers import WIDGETS


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the tag page generator.

    :param argv: Argument list; defaults to sys.argv[1:].
    :return: Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(description="Render tag usage counts as an HTML tag page")

    parser.add_argument(
        "--input",
        required=True,
        help="CSV (tag,count) or JSON file with tag counts or tagged records"
    )

    parser.add_argument(
        "--widget",
        action="append",
        choices=WIDGETS,
        help="Widget to include; repeat for several (default: all)"
    )

    parser.add_argument(
        "--output",
        type=str,
        default="tags.html",
        help="Path of the generated page (default: ./tags.html)"
    )

    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="YAML render profile with index/cloud/heat_map sections"
    )

    parser.add_argument(
        "--url-pattern",
        type=str,
        default=DEFAULT_URL_PATTERN,
        help=f"Link target for each tag, with {{tag}} as placeholder (default: {DEFAULT_URL_PATTERN})"
    )

    parser.add_argument(
        "--title",
        type=str,
        default=DEFAULT_PAGE_TITLE,
        help="Page title"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log messages to this file"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)
    if not args.widget:
        args.widget = list(WIDGETS)
    if "{tag}" not in args.url_pattern:
        parser.error("--url-pattern must contain the {tag} placeholder")
    return args
