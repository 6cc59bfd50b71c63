#!/usr/bin/env python3
"""
Heading section highlighting.

Given an anchor such as "#terminology", the target heading and everything
after it up to the next heading of the same or a higher level is wrapped in
div.highlight2. Only one highlight exists at a time.
"""
import re
from urllib.parse import unquote

from bs4 import BeautifulSoup, Tag

HIGHLIGHT_CLASS = 'highlight2'
_HEADING_NAME = re.compile(r'^h([1-6])$')


def _level(el):
    if not isinstance(el, Tag):
        return None
    m = _HEADING_NAME.match(el.name or '')
    return int(m.group(1)) if m else None


def get_heading_level(el):
    """2-6 for h2..h6; None for h1 and anything else."""
    level = _level(el)
    return level if level and level >= 2 else None


def collect_heading_siblings(heading, level: int) -> list:
    """The heading and its following element siblings up to the next heading of level <= level."""
    nodes = [heading]
    for sibling in heading.find_next_siblings():
        sibling_level = _level(sibling)
        if sibling_level is not None and sibling_level <= level:
            break
        nodes.append(sibling)
    return nodes


def wrap_nodes_with_highlight(soup: BeautifulSoup, nodes: list):
    """Wrap nodes in div.highlight2 placed where the first node was. None for no nodes."""
    if not nodes:
        return None
    wrapper = soup.new_tag('div', attrs={'class': HIGHLIGHT_CLASS})
    nodes[0].insert_before(wrapper)
    for node in nodes:
        wrapper.append(node.extract())
    return wrapper


def remove_existing_highlights(soup: BeautifulSoup) -> int:
    """Unwrap every highlight wrapper, keeping its children in place. Returns the count."""
    wrappers = soup.select(f'div.{HIGHLIGHT_CLASS}')
    for wrapper in wrappers:
        wrapper.unwrap()
    return len(wrappers)


def highlight_heading_section(soup: BeautifulSoup, anchor: str) -> bool:
    """Highlight the section of the h2-h6 heading named by anchor ("#id")."""
    if not anchor or not anchor.startswith('#') or len(anchor) < 2:
        return False

    target = soup.find(id=unquote(anchor[1:]))
    level = get_heading_level(target)
    if level is None:
        return False

    remove_existing_highlights(soup)
    wrap_nodes_with_highlight(soup, collect_heading_siblings(target, level))
    return True
