#!/usr/bin/env python3
"""
Font size controls.
The page carries #decreaseBtn / #increaseBtn; the page script changes the
body font size by FONT_SIZE_STEP within [FONT_SIZE_MIN, FONT_SIZE_MAX].
"""
from bs4 import BeautifulSoup

from . import config


def next_font_size(current: float, change: float) -> float:
    """current + change if it stays within the limits, else current unchanged."""
    new_size = current + change
    if config.FONT_SIZE_MIN <= new_size <= config.FONT_SIZE_MAX:
        return new_size
    return current


def font_size_buttons_html() -> str:
    return (
        '<button id="decreaseBtn" class="btn btn-sm btn-outline-secondary" title="Decrease font size">A-</button>'
        '<button id="increaseBtn" class="btn btn-sm btn-outline-secondary" title="Increase font size">A+</button>'
    )


def font_size_script() -> str:
    """Client-side twin of next_font_size(), wired to the two buttons."""
    return f"""
    function adjustFontSize(change) {{
        const body = document.body;
        const current = parseFloat(window.getComputedStyle(body).fontSize);
        const next = current + change;
        if (next >= {config.FONT_SIZE_MIN} && next <= {config.FONT_SIZE_MAX}) {{
            body.style.fontSize = next + 'px';
        }}
    }}
    document.addEventListener('DOMContentLoaded', () => {{
        const dec = document.getElementById('decreaseBtn');
        const inc = document.getElementById('increaseBtn');
        if (dec) dec.addEventListener('click', () => adjustFontSize(-{config.FONT_SIZE_STEP}));
        if (inc) inc.addEventListener('click', () => adjustFontSize({config.FONT_SIZE_STEP}));
    }});
"""


def ensure_font_size_controls(soup: BeautifulSoup) -> bool:
    """Add the buttons to .service-menu when the page has none. True if added."""
    if soup.find(id='decreaseBtn') is not None:
        return False
    menu = soup.select_one('.service-menu')
    if menu is None:
        return False
    buttons = BeautifulSoup(font_size_buttons_html(), 'html.parser')
    for button in list(buttons.find_all('button')):
        menu.append(button.extract())
    return True
