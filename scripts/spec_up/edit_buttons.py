#!/usr/bin/env python3
"""
Edit and history links for local term definitions.
Each dt.term-local gets links to its term file on GitHub (blob and commits views).
"""
from bs4 import BeautifulSoup

from . import config
from .utils import path_join

EDIT_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="18" height="18" fill="currentColor" viewBox="0 0 16 16">'
    '<path fill-rule="evenodd" d="M12.146.146a.5.5 0 0 1 .708 0l3 3a.5.5 0 0 1 0 .708l-10 10a.5.5 0 0 1-.168.11'
    'l-5 2a.5.5 0 0 1-.65-.65l2-5a.5.5 0 0 1 .11-.168l10-10zM11.207 2.5 13.5 4.793 14.793 3.5 12.5 1.207 11.207 2.5z'
    'm1.586 3L10.5 3.207 4 9.707V10h.5a.5.5 0 0 1 .5.5v.5h.5a.5.5 0 0 1 .5.5v.5h.293l6.5-6.5z"/></svg>'
)
HISTORY_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="18" height="18" fill="currentColor" viewBox="0 0 16 16">'
    '<path fill-rule="evenodd" d="M8 1a7 7 0 1 0 4.95 11.95l.707.707A8.001 8.001 0 1 1 8 0v1z"/>'
    '<path fill-rule="evenodd" d="M7.5 3a.5.5 0 0 1 .5.5v5.21l3.248 1.856a.5.5 0 0 1-.496.868l-3.5-2A.5.5 0 0 1 7 9V3.5'
    'a.5.5 0 0 1 .5-.5z"/><circle cx="8" cy="8" r="0.3"/></svg>'
)


def find_deepest_term_span(element):
    """Spec-Up nests one span per alias; the innermost one is the term itself."""
    current = element
    while True:
        inner = current.select_one('span[id^="term:"]')
        if inner is None:
            return current
        current = inner


def term_file_path(spec: dict, term_id: str) -> str:
    return path_join(spec.get('spec_directory'), spec.get('spec_terms_directory'), term_id + '.md')


def build_edit_buttons_html(spec: dict, term_id: str) -> str:
    source = spec.get('source') or {}
    branch = source.get('branch') or config.DEFAULT_BRANCH
    repo = f"https://github.com/{source.get('account', '')}/{source.get('repo', '')}"
    file_path = term_file_path(spec, term_id)
    return (
        '<span class="edit-term-buttons">'
        f'<a title="Link to the term file in the Github repo in a new tab" target="_blank" rel="noopener" '
        f'href="{repo}/blob/{branch}/{file_path}" class="p-1 edit-term-button btn">{EDIT_ICON}</a>'
        f'<a title="Link to a GitHub page that shows a history of the edits in a new tab" target="_blank" '
        f'rel="noopener" href="{repo}/commits/{branch}/{file_path}" class="p-1 history-term-button btn">'
        f'{HISTORY_ICON}</a>'
        '</span>'
    )


def add_edit_term_buttons(soup: BeautifulSoup, spec: dict) -> int:
    """Append edit/history links to every local term. Returns the number of terms changed."""
    count = 0
    for dt in soup.select('dt.term-local'):
        term = find_deepest_term_span(dt)
        if term is dt or term.find('span', class_='edit-term-buttons') is not None:
            continue

        term_id = term['id'].split(':', 1)[1]
        buttons = BeautifulSoup(build_edit_buttons_html(spec, term_id), 'html.parser')
        term.append(buttons.span.extract())
        count += 1
    return count
