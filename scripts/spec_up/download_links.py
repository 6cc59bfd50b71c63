#!/usr/bin/env python3
"""
PDF/DOCX download buttons.

Probes for index.pdf and index.docx next to the page and inserts a button
for each one that exists at the start of .service-menu (PDF first).
Remote bases are probed with HEAD requests, local ones on disk.
Safe to run more than once.
"""
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from .utils import add_class

PROBE_TIMEOUT = 10  # seconds per HEAD request

DOWNLOAD_ITEMS = (
    {'href': './index.pdf', 'title': 'Download this page as a PDF', 'cls': 'button-pdf-download'},
    {'href': './index.docx', 'title': 'Download this page as a DOCX', 'cls': 'button-docx-download'},
)

FILE_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" fill="none" stroke="currentColor" '
    'stroke-width="1.5" class="me-1" viewBox="0 0 16 16">'
    '<path d="M4 0a2 2 0 0 0-2 2v12a2 2 0 0 0 2 2h8a2 2 0 0 0 2-2V4.5L9.5 0H4zm0 1h5v4h4v9a1 1 0 0 1-1 1H4'
    'a1 1 0 0 1-1-1V2a1 1 0 0 1 1-1zm7 4h-1V2l3 3h-2z"/></svg>'
)


def is_remote(base: str) -> bool:
    return str(base).startswith(('http://', 'https://'))


def check_exists(base, href: str, session=None) -> bool:
    """True when href (relative to base) exists. Any request failure counts as missing."""
    if not is_remote(base):
        return (Path(base) / href).is_file()

    url = urljoin(str(base).rstrip('/') + '/', href)
    http = session or requests
    try:
        response = http.head(url, allow_redirects=True, timeout=PROBE_TIMEOUT)
    except requests.RequestException as e:
        print(f"   [Downloads] HEAD {url} failed: {e}")
        return False
    return response.ok


def create_button(soup: BeautifulSoup, item: dict):
    a = soup.new_tag('a', attrs={
        'target': '_blank',
        'rel': 'noopener noreferrer',
        'href': item['href'],
        'title': item['title'],
        'aria-label': item['title'],
    })
    add_class(a, item['cls'], 'btn', 'd-block', 'btn-sm', 'btn-outline-secondary')
    a.append(BeautifulSoup(FILE_ICON, 'html.parser').svg.extract())
    return a


def add_download_buttons(soup: BeautifulSoup, base, session=None) -> list:
    """
    Insert download buttons for the files found next to the page.

    Args:
        soup: parsed page
        base: directory or http(s) URL the page is served from
        session: optional requests.Session for remote probes

    Returns:
        list of the button classes that were inserted
    """
    container = soup.select_one('.service-menu')
    if container is None:
        return []

    with ThreadPoolExecutor(max_workers=len(DOWNLOAD_ITEMS)) as pool:
        exists = list(pool.map(lambda item: check_exists(base, item['href'], session), DOWNLOAD_ITEMS))

    inserted = []
    position = 0
    for item, found in zip(DOWNLOAD_ITEMS, exists):
        if not found or container.select_one(f".{item['cls']}") is not None:
            continue
        container.insert(position, create_button(soup, item))
        position += 1
        inserted.append(item['cls'])
    return inserted
