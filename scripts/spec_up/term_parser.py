#!/usr/bin/env python3
"""
Term parser for template tags.

Handles the terminology family of template tags:
    [[def: term, alias1, alias2, ...]]   local term definition
    [[ref: term]]                         link to a local term
    [[iref: term]]                        inline copy placeholder of a local term
    [[xref: spec, term, alias]]           link to a term in an external spec
    [[tref: spec, term, alias1, ...]]     external term transcluded as a definition

Definitions and references are recorded on a config.RenderState.
"""
import html
import re
import sys

from . import config
from .template_tags import TemplateTag

TERMINOLOGY_TYPES = re.compile(r'^def$|^ref$|^iref$|^xref|^tref$', re.IGNORECASE)
WHITESPACE = re.compile(r'\s+')

_REFERENCE_TYPE = re.compile(r'\[\[(xref|tref):')
_OPENING_TAG = re.compile(r'\[\[(?:xref|tref):')
_CLOSING_TAG = re.compile(r'\]\]')


def sanitize_term_id(value: str) -> str:
    """
    Remove characters that break CSS selectors.
    "authentic-chained-data-container-(acdc)" -> "authentic-chained-data-container-acdc"
    """
    value = re.sub(r'[()\[\]{}/\\]', '-', value)
    value = re.sub(r'-+', '-', value)
    return value.strip('-')


def term_id(name: str) -> str:
    """Fragment id (without the "term:" prefix) for a term or alias."""
    return sanitize_term_id(WHITESPACE.sub('-', name.strip()).lower())


def _attr_id(name: str) -> str:
    return html.escape(term_id(name))


def _display_text(term_name, aliases, kind):
    original = (f"<span class='term-{kind}-original-term term-original-term' "
                f"title='original term'>{html.escape(term_name)}</span>")
    if not aliases:
        return original

    parenthetical = [html.escape(a) for a in aliases[1:]]
    parenthetical.append(original)
    return (f"{html.escape(aliases[0])} "
            f"<span class='term-{kind}-parenthetical-terms'>({', '.join(parenthetical)})</span>")


def parse_def(state, token, primary):
    args = token.meta['args']
    term_name = args[0]
    aliases = [a for a in args[1:] if a]

    record = {
        'term': term_name,
        'alias': aliases[0] if aliases else None,
        'aliases': aliases,
        'source': 'unknown',
    }
    state.definitions.append(record)
    token.meta['definition'] = record

    acc = _display_text(term_name, aliases, 'local')
    for syn in [term_name] + aliases:
        acc = f'<span id="term:{_attr_id(syn)}">{acc}</span>'
    return acc


def parse_ref(state, primary):
    state.references.append(primary)
    state.reference_kinds.append('ref')
    return (f'<a class="term-reference" href="#term:{_attr_id(primary)}">'
            f'{html.escape(primary)}</a>')


def parse_iref(state, primary):
    # Replaced in the browser by a copy of the matching dt/dd pair
    state.references.append(primary)
    state.reference_kinds.append('iref')
    return (f'<span class="iref-placeholder" data-iref-term="{_attr_id(primary)}" '
            f'data-iref-original="{html.escape(primary)}"></span>')


def parse_xref(spec, state, token):
    args = token.meta['args']
    spec_key = args[0]
    external = config.find_external_spec(spec, spec_key)
    if external is None or len(args) < 2:
        return (f'<span class="no-xref-found-message" '
                f'title="External spec \'{html.escape(spec_key)}\' not found in configuration">'
                f'xref cannot be resolved</span>')

    term_name = args[1]
    aliases = [a for a in args[2:] if a]
    term = WHITESPACE.sub('-', term_name).lower()
    display = aliases[0] if aliases else term_name

    href = f"{external.get('gh_page', '')}#term:{term}"
    attrs = (f'class="x-term-reference term-reference" '
             f'data-local-href="#term:{html.escape(spec_key)}:{html.escape(term)}" href="{html.escape(href)}"')

    content = state.xref_terms.get((spec_key, term))
    if content:
        clean = html.escape(WHITESPACE.sub(' ', content))
        attrs += f' title="External term definition" data-term-content="{clean}"'

    return f'<a {attrs}>{html.escape(display)}</a>'


def parse_tref(token):
    args = token.meta['args']
    if len(args) < 2:
        return None
    term_name = args[1]
    aliases = [a for a in args[2:] if a]

    terms_and_aliases = [term_name] + aliases
    acc = _display_text(term_name, aliases, 'external')
    last = len(terms_and_aliases) - 1
    for index, syn in enumerate(terms_and_aliases):
        title = (f' title="Externally defined as {html.escape(term_name)}"'
                 if index == 0 and aliases else '')
        outer = (f' data-original-term="{html.escape(term_name)}" class="term-external"'
                 if index == last else '')
        acc = f'<span id="term:{_attr_id(syn)}"{outer}{title}>{acc}</span>'
    return acc


def parse_template_tag(spec, state, token, type_, primary=None, *rest):
    """Dispatch one terminology tag. Returns the HTML for the token, or None."""
    if not primary:
        return None

    kind = type_.lower()
    if kind == 'def':
        return parse_def(state, token, primary)
    if kind == 'iref':
        return parse_iref(state, primary)
    if kind == 'xref':
        return parse_xref(spec, state, token)
    if kind == 'tref':
        return parse_tref(token)
    return parse_ref(state, primary)


def create_terminology_template(spec, state):
    """TemplateTag for def/ref/iref/xref/tref bound to a spec and render state."""
    return TemplateTag(
        filter=lambda type_: bool(TERMINOLOGY_TYPES.match(type_)),
        parse=lambda token, type_, *args: parse_template_tag(spec, state, token, type_, *args),
    )


def track_source_files(state_core):
    """
    Core rule (after "inline"): stamp each definition with the markdown file it
    came from, using the <!-- file: name --> markers placed between files.
    """
    current = None
    for token in state_core.tokens:
        if token.type == 'html_block':
            m = config.FILE_MARKER_PATTERN.search(token.content or '')
            if m:
                current = m.group(1)
        elif token.type == 'inline' and token.children:
            for child in token.children:
                record = child.meta.get('definition') if child.type == 'template' else None
                if record is not None and current:
                    record['source'] = current


def process_xtref_object(xtref: str) -> dict:
    """Parse a raw [[xref:...]] / [[tref:...]] string into its parts."""
    m = _REFERENCE_TYPE.search(xtref)
    reference_type = m.group(1) if m else 'unknown'

    stripped = _CLOSING_TAG.sub('', _OPENING_TAG.sub('', xtref, count=1), count=1).strip()
    parts = stripped.split(',')

    result = {
        'externalSpec': parts[0].strip(),
        'term': parts[1].strip() if len(parts) > 1 else '',
        'referenceType': reference_type,
        'trefAliases': [],
        'xrefAliases': [],
    }
    aliases = [p.strip() for p in parts[2:] if p.strip()]

    if reference_type == 'tref':
        result['trefAliases'] = aliases
        if aliases:
            result['firstTrefAlias'] = aliases[0]
    elif reference_type == 'xref':
        result['xrefAliases'] = aliases
        if aliases:
            result['firstXrefAlias'] = aliases[0]
        if len(aliases) > 1:
            print(f"  [xref] Invalid xref syntax: [[xref: {result['externalSpec']}, {result['term']}, "
                  f"{', '.join(aliases)}]] has {len(aliases)} aliases. Only the first alias "
                  f"\"{aliases[0]}\" will be used. Extra aliases ignored: {', '.join(aliases[1:])}.",
                  file=sys.stderr)
    return result


def find_unresolved_references(state) -> list:
    """References whose id matches no definition term or alias, in document order."""
    known = set()
    for d in state.definitions:
        known.add(term_id(d['term']))
        for alias in d.get('aliases') or [d.get('alias')]:
            if alias:
                known.add(term_id(alias))
    return [ref for ref in state.references if term_id(ref) not in known]


def find_unresolved_reference_tags(state) -> list:
    """Like find_unresolved_references, as (tag type, name) pairs."""
    kinds = state.reference_kinds
    unresolved = set(find_unresolved_references(state))
    return [(kinds[i] if i < len(kinds) else 'ref', ref)
            for i, ref in enumerate(state.references) if ref in unresolved]
