#!/usr/bin/env python3
"""
Table of Contents extractor.
Extracts a nested TOC from the rendered spec body.
"""
import html
import re

TOC_FIRST_LEVEL = 2
TOC_LAST_LEVEL = 4

_HEADING = re.compile(
    r'<h([1-6])\b[^>]*\bid=["\']([^"\']+)["\'][^>]*>(.*?)</h\1>',
    re.IGNORECASE | re.DOTALL
)
_PERMALINK = re.compile(r'<a\b[^>]*class=["\'][^"\']*header-anchor[^"\']*["\'][^>]*>.*?</a>',
                        re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r'<[^>]+>')


def extract_headings(body_html: str) -> list:
    """Return [(level, id, text)] for headings with ids within the TOC levels."""
    headings = []
    for m in _HEADING.finditer(body_html):
        level = int(m.group(1))
        if level < TOC_FIRST_LEVEL or level > TOC_LAST_LEVEL:
            continue
        text = _TAG.sub('', _PERMALINK.sub('', m.group(3)))
        text = html.unescape(text).strip()
        if not text:
            continue
        headings.append((level, m.group(2), text))
    return headings


def extract_toc_from_body(body_html: str) -> str:
    """
    Build the TOC markup as nested <ul class="toc"> lists.

    A heading deeper than the previous one opens a sub-list; a shallower one
    closes sub-lists until it fits. Skipped levels (h2 -> h4) nest once.
    """
    headings = extract_headings(body_html)
    if not headings:
        return ''

    out = '<ul class="toc">'
    stack = [headings[0][0]]
    first = True

    for level, eid, text in headings:
        if first:
            first = False
        elif level > stack[-1]:
            out += '<ul>'
            stack.append(level)
        else:
            out += '</li>'
            while len(stack) > 1 and level <= stack[-2]:
                out += '</ul></li>'
                stack.pop()
            if len(stack) > 1:
                stack[-1] = level
        out += f'<li><a href="#{html.escape(eid)}">{html.escape(text)}</a>'

    out += '</li>'
    while len(stack) > 1:
        out += '</ul></li>'
        stack.pop()
    out += '</ul>'
    return out
