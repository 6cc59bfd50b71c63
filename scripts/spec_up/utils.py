#!/usr/bin/env python3
"""
Utility functions for spec_up.
Includes class-list helpers, path joining, markdown discovery, and output validation.
"""
import re
from pathlib import Path

from . import config
from .escape_protection import ESCAPED_PLACEHOLDER


def class_list(tag) -> list:
    # new_tag() leaves class as a plain string, parsed markup gives a list
    value = tag.get('class') or []
    if isinstance(value, str):
        value = value.split()
    return list(value)


def has_class(tag, name: str) -> bool:
    return name in class_list(tag)


def add_class(tag, *names):
    classes = class_list(tag)
    for name in names:
        if name not in classes:
            classes.append(name)
    tag['class'] = classes


def remove_class(tag, name: str):
    classes = [c for c in class_list(tag) if c != name]
    if classes:
        tag['class'] = classes
    elif tag.has_attr('class'):
        del tag['class']


def path_join(*segments) -> str:
    """Join URL-style path segments, skipping empty ones and collapsing repeated slashes."""
    joined = '/'.join(str(s) for s in segments if s)
    return re.sub(r'/+', '/', joined)


def read_file_text(path) -> str:
    return Path(path).read_text(encoding='utf-8', errors='replace')


def discover_term_files(spec: dict) -> list:
    """Markdown files in the terms directory, sorted, relative to spec_directory."""
    terms_dir = Path(spec['spec_directory']) / spec['spec_terms_directory']
    if not terms_dir.is_dir():
        return []
    return [f"{spec['spec_terms_directory']}/{f.name}" for f in sorted(terms_dir.glob('*.md'))]


def discover_markdown_paths(spec: dict) -> list:
    """
    markdown_paths from the config with the term files added.
    Term files go right after the terms intro file when it is listed, else at the end.
    """
    paths = list(spec.get('markdown_paths') or ['spec.md'])
    term_files = [t for t in discover_term_files(spec) if t not in paths]
    if not term_files:
        return paths

    if config.TERMS_INTRO_FILE in paths:
        at = paths.index(config.TERMS_INTRO_FILE) + 1
        return paths[:at] + term_files + paths[at:]
    return paths + term_files


def validate_output_safety(html_content: str, filename: str) -> tuple:
    """
    Validates that output HTML is safe to write (not empty/corrupted).
    Returns: (is_safe: bool, error_message: str)
    """
    if not html_content:
        return False, f"Empty content for {filename}"

    if len(html_content) < config.MIN_CONTENT_LENGTH:
        return False, f"Content too short ({len(html_content)} chars) for {filename}"

    lowered = html_content.lower()
    if '<html' not in lowered:
        return False, f"Missing <html> tag in {filename}"

    if '<body' not in lowered:
        return False, f"Missing <body> tag in {filename}"

    if ESCAPED_PLACEHOLDER in html_content:
        return False, f"Unrestored escape placeholder in {filename}"

    return True, ""
