#!/usr/bin/env python3
"""
Page enhancements applied to a rendered spec page.
Each step is independent and only touches the markup it selects.
"""
from bs4 import BeautifulSoup

from .download_links import add_download_buttons
from .edit_buttons import add_edit_term_buttons
from .font_size import ensure_font_size_controls
from .highlight import highlight_heading_section
from .meta_info import collapse_meta_info, fix_last_dd
from .repo_info import populate_repo_info_in_settings


def enhance_soup(soup: BeautifulSoup, spec: dict, download_base=None, anchor=None, session=None) -> dict:
    """
    Apply all page enhancements in order. Returns a summary of what changed.

    download_base: directory or URL probed for index.pdf / index.docx (skipped when None)
    anchor: "#id" of a heading to highlight (skipped when None)
    """
    summary = {
        'font_size_controls': ensure_font_size_controls(soup),
        'repo_info': populate_repo_info_in_settings(soup),
        'edit_buttons': add_edit_term_buttons(soup, spec),
        'meta_info': collapse_meta_info(soup),
        'last_dd': fix_last_dd(soup),
        'downloads': [],
        'highlight': False,
    }
    if download_base is not None:
        summary['downloads'] = add_download_buttons(soup, download_base, session=session)
    if anchor:
        summary['highlight'] = highlight_heading_section(soup, anchor)
    return summary


def enhance_html(page_html: str, spec: dict, download_base=None, anchor=None, session=None) -> str:
    soup = BeautifulSoup(page_html, 'html.parser')
    enhance_soup(soup, spec, download_base=download_base, anchor=anchor, session=session)
    return str(soup)
