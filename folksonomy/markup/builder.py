from typing import Optional

from lxml import etree
from markupsafe import Markup

from folksonomy.config.defaults import (
    HEAT_MAP_COUNT_CSS_CLASS,
    HEAT_MAP_TRIANGLE_CSS_CLASS,
    LINK_REL,
    LINK_TITLE,
)


def tag_list(control_id: str, css_class: str) -> etree._Element:
    """Container ``<ul>`` every widget hangs its items off."""
    ul = etree.Element("ul")
    ul.set("id", control_id)
    ul.set("class", css_class)
    return ul


def list_item(parent: etree._Element, style: Optional[str] = None) -> etree._Element:
    li = etree.SubElement(parent, "li")
    if style:
        li.set("style", style)
    return li


def tag_link(parent: etree._Element, href: str, tag: str, css_class: str = "") -> etree._Element:
    """
    Append ``<a href title rel>`` for one tag.

    Tag text and href are set as plain values; lxml escapes them on output.
    """
    link = etree.SubElement(parent, "a")
    link.set("href", href)
    link.set("title", LINK_TITLE.format(tag))
    link.set("rel", LINK_REL)
    if css_class:
        link.set("class", css_class)
    link.text = tag
    return link


def count_label(parent: etree._Element, count: int) -> etree._Element:
    span = etree.SubElement(parent, "span")
    span.text = f"({count})"
    return span


def heat_map_count(parent: etree._Element, count: int) -> etree._Element:
    """Count bubble shown next to a heat map bar: a labelled span plus a pointer triangle."""
    span = etree.SubElement(parent, "span")
    span.set("class", HEAT_MAP_COUNT_CSS_CLASS)

    count_anchor = etree.SubElement(span, "a")
    count_anchor.text = str(count)

    triangle = etree.SubElement(span, "span")
    triangle.set("class", HEAT_MAP_TRIANGLE_CSS_CLASS)
    return span


def to_markup(root: etree._Element) -> Markup:
    return Markup(etree.tostring(root, method="html", encoding="unicode"))
