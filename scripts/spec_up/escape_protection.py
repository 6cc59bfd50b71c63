#!/usr/bin/env python3
"""
Escape protection utilities.
Hides escaped template tags (\\[[...]]) from the markdown parser and restores them afterward.
"""
import re

# Letters only, so no markdown rule (emphasis, links) can touch it
ESCAPED_PLACEHOLDER = "SPECUPESCAPEDTAGPLACEHOLDER"

_ESCAPED_TAG = re.compile(r'\\(\[\[)')
_PLACEHOLDER = re.compile(re.escape(ESCAPED_PLACEHOLDER))


def pre_process_escapes(content: str) -> str:
    """Replace \\[[ with a placeholder token."""
    if not content:
        return content
    return _ESCAPED_TAG.sub(ESCAPED_PLACEHOLDER, content)


def post_process_escapes(content: str) -> str:
    """Restore placeholders to a literal [[."""
    if not content:
        return content
    return _PLACEHOLDER.sub('[[', content)


def process_with_escapes(content: str, process) -> str:
    """Run process() on content with escaped tags protected."""
    if not content:
        return content
    return post_process_escapes(process(pre_process_escapes(content)))
