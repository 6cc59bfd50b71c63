#!/usr/bin/env python3
"""
Collapsible meta info for term definitions, and last-dd marking.

A <dd> holding a table carries meta information about its term. It is
wrapped and collapsed by default; a toggle button in the term's button
container expands it (click handling lives in the page script).
"""
from bs4 import BeautifulSoup

from .button_container import CONTAINER_CLASS, add_button_to_container
from .utils import add_class, has_class, remove_class

TOGGLE_CLASS = 'meta-info-toggle-button'
WRAPPER_CLASS = 'meta-info-content-wrapper'
INNER_WRAPPER_CLASS = 'meta-info-inner-wrapper'
COLLAPSED_CLASS = 'collapsed'
LAST_DD_CLASS = 'last-dd'
TARGET_ATTR = 'data-meta-info-target'


def create_toggle_button(soup: BeautifulSoup, target_id: str = None):
    button = soup.new_tag('button', attrs={'title': 'Meta info'})
    add_class(button, TOGGLE_CLASS, 'btn', 'fs-1', 'd-flex', 'align-items-center', 'justify-content-center')
    if target_id:
        button[TARGET_ATTR] = target_id
    icon = soup.new_tag('i', attrs={'style': 'margin-top: -0.5em;'})
    add_class(icon, 'bi', 'bi-info-circle')
    button.append(icon)
    return button


def _has_toggle(tag) -> bool:
    return tag is not None and tag.select_one(f'.{TOGGLE_CLASS}') is not None


def ensure_id(soup: BeautifulSoup, dd) -> str:
    """Give dd a unique meta-info-N id unless it has one."""
    if dd.get('id'):
        return dd['id']
    n = 1
    while soup.find(id=f'meta-info-{n}') is not None:
        n += 1
    dd['id'] = f'meta-info-{n}'
    return dd['id']


def attach_toggle_button(soup: BeautifulSoup, dd):
    """
    Add a toggle button bound to dd (via data-meta-info-target).
    It goes into the nearest preceding <dt>'s button container, after any
    toggles already there, or at the top of dd when there is no dt.
    """
    button = create_toggle_button(soup, ensure_id(soup, dd))
    dt = dd.find_previous_sibling('dt')
    if dt is None:
        dd.insert(0, button)
        return button

    container = dt.find('div', class_=CONTAINER_CLASS)
    toggles = container.select(f'.{TOGGLE_CLASS}') if container is not None else []
    if toggles:
        toggles[-1].insert_after(button)
    else:
        add_button_to_container(soup, dt, button, prepend=True)
    return button


def collapse_meta_info(soup: BeautifulSoup) -> int:
    """Make every dl > dd with a table collapsible. Returns the number of dd changed."""
    count = 0
    for dd in soup.select('dl > dd'):
        if dd.find('table') is None:
            continue
        if dd.find('div', class_=INNER_WRAPPER_CLASS, recursive=False) is not None:
            continue

        add_class(dd, WRAPPER_CLASS)
        wrapper = soup.new_tag('div', attrs={'class': INNER_WRAPPER_CLASS})

        # Move everything up to an existing toggle button into the wrapper
        for child in list(dd.contents):
            if getattr(child, 'name', None) and has_class(child, TOGGLE_CLASS):
                break
            wrapper.append(child.extract())

        if not _has_toggle(dd):
            attach_toggle_button(soup, dd)

        dd.append(wrapper)
        add_class(dd, COLLAPSED_CLASS)
        count += 1
    return count


def fix_last_dd(soup: BeautifulSoup) -> int:
    """
    Mark the last <dd> of each term group in terms-and-definitions lists.
    A dd is last when the next element is a <dt> or there is none.
    """
    marked = 0
    for dl in soup.select('dl.terms-and-definitions-list'):
        for dd in dl.find_all('dd', recursive=False):
            remove_class(dd, LAST_DD_CLASS)
            nxt = dd.find_next_sibling()
            if nxt is None or nxt.name == 'dt':
                add_class(dd, LAST_DD_CLASS)
                marked += 1
    return marked
