#!/usr/bin/env python3
"""
Specification references.

    [[spec: RFC 2119]]          [<a class="spec-reference" href="#ref:RFC-2119">RFC-2119</a>]
    [[spec-normative]]          <dl class="reference-list"> of every spec-normative reference
    [[spec-informative: NAME]]  reference recorded in the spec-informative group

Entries come from a reference corpus: a JSON object mapping names to
{title, href, authors, rawDate, status}, read from the path in the
spec's "spec_corpus" key.
"""
import html
import json
import re
from pathlib import Path

from . import config
from .template_tags import TemplateTag

SPEC_NAME_TYPES = re.compile(r'^spec$|^spec-*\w+$', re.IGNORECASE)
WHITESPACE = re.compile(r'\s+')


def load_spec_corpus(path) -> dict:
    """Read the reference corpus. No path means an empty corpus."""
    if not path:
        return {}
    path = Path(path)
    if not path.is_file():
        raise config.SpecConfigError(f"Reference corpus {path} not found")
    try:
        corpus = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise config.SpecConfigError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(corpus, dict):
        raise config.SpecConfigError(f"{path} does not hold a JSON object")
    return corpus


def normalize_spec_name(name: str) -> str:
    return WHITESPACE.sub('-', name.strip()).upper()


def find_spec_in_corpus(corpus: dict, name: str):
    normalized = normalize_spec_name(name)
    for key in (normalized, normalized.lower(), name.lower(), name):
        if key in corpus:
            return corpus[key]
    return None


def parse_spec_reference(corpus, state, token, type_, name=None, *rest):
    """Record a named reference in its group. Leaves token.content untouched."""
    if not name:
        return None

    entry = find_spec_in_corpus(corpus, name)
    if entry is None:
        print(f"  Warning: [[{type_}: {name}]] is not in the reference corpus")
        return None

    normalized = normalize_spec_name(name)
    reference = dict(entry, _name=normalized)
    state.spec_groups.setdefault(type_.lower(), {})[normalized] = reference
    token.meta['spec'] = reference
    return None


def render_individual_spec(token):
    reference = token.meta.get('spec')
    if not reference:
        return None
    name = html.escape(reference['_name'])
    return f'[<a class="spec-reference" href="#ref:{name}">{name}</a>]'


def render_ref_group(type_, spec_groups) -> str:
    """Definition list of a group's references, sorted by name."""
    group = spec_groups.get(type_.lower())
    if not group:
        return ''

    out = '<dl class="reference-list">'
    for name in sorted(group, key=str.lower):
        ref = group[name]
        authors = '; '.join(ref.get('authors') or [])
        out += (
            f'\n<dt id="ref:{html.escape(name)}">{html.escape(name)}</dt>'
            f'\n<dd><cite><a href="{html.escape(ref.get("href", ""))}">{html.escape(ref.get("title", ""))}</a></cite>. '
            f'{html.escape(authors)}; {html.escape(str(ref.get("rawDate", "")))}. '
            f'<span class="reference-status">Status: {html.escape(str(ref.get("status", "")))}</span>.</dd>'
        )
    return f'\n{out}\n</dl>\n'


def render_spec_reference(state, token, type_, name=None, *rest):
    if name:
        return render_individual_spec(token)
    return render_ref_group(type_, state.spec_groups)


def create_spec_reference_template(corpus, state):
    """TemplateTag for [[spec...]] tags bound to a corpus and render state."""
    return TemplateTag(
        filter=lambda type_: bool(SPEC_NAME_TYPES.match(type_)),
        parse=lambda token, type_, *args: parse_spec_reference(corpus, state, token, type_, *args),
        render=lambda token, type_, *args: render_spec_reference(state, token, type_, *args),
    )
