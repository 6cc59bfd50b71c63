#!/usr/bin/env python3
"""
Button container helpers for definition terms.
Every control added to a <dt> goes into one div.definition-buttons-container.
"""
from bs4 import BeautifulSoup

CONTAINER_CLASS = 'definition-buttons-container'


def get_or_create_button_container(soup: BeautifulSoup, dt):
    """Return the dt's button container, appending a new one if it has none."""
    container = dt.find('div', class_=CONTAINER_CLASS)
    if container is None:
        container = soup.new_tag('div', attrs={'class': CONTAINER_CLASS})
        dt.append(container)
    return container


def add_button_to_container(soup: BeautifulSoup, dt, button, prepend: bool = False):
    """Add button to the dt's container (first if prepend). Returns the container."""
    container = get_or_create_button_container(soup, dt)
    if prepend:
        container.insert(0, button)
    else:
        container.append(button)
    return container
