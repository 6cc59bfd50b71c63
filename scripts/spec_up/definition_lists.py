#!/usr/bin/env python3
"""
Definition list enhancements for markdown-it.

- The first <dl> after the terminology section marker becomes the
  terms-and-definitions-list, unless it already has a class or holds
  spec references (id="ref:...").
- <dt> elements are tagged term-local ([[def:...]]) or term-external
  ([[tref:...]]) and get data-sourcefile from the nearest file marker.
- Empty <dt></dt> pairs are dropped.
"""
from . import config
from .table_enhancement import previous_rule

TERMS_LIST_CLASS = 'terms-and-definitions-list'


def find_target_index(tokens, target):
    for i, token in enumerate(tokens):
        if token.content and target in token.content:
            return i
    return -1


def mark_empty_dt_elements(tokens, start):
    for i in range(start, len(tokens) - 1):
        if tokens[i].type == 'dl_close':
            break
        if tokens[i].type == 'dt_open' and tokens[i + 1].type == 'dt_close':
            tokens[i].meta['is_empty'] = True
            tokens[i + 1].meta['is_empty'] = True


def is_spec_reference(token):
    if token.type == 'dt_open':
        return str(token.attrGet('id') or '').startswith('ref:')
    if token.type in ('html_block', 'html_inline', 'inline'):
        return bool(token.content) and 'id="ref:' in token.content
    return False


def contains_spec_references(tokens, start):
    for token in tokens[start:]:
        if token.type == 'dl_close':
            break
        if is_spec_reference(token):
            return True
    return False


def term_template_types(tokens, dt_open_index):
    """Template tag types used inside one <dt>."""
    types = set()
    for token in tokens[dt_open_index + 1:]:
        if token.type == 'dt_close':
            break
        if token.type == 'inline' and token.children:
            for child in token.children:
                if child.type == 'template':
                    types.add(child.meta['type'].lower())
    return types


def find_source_file(tokens, idx):
    for token in reversed(tokens[:idx]):
        if token.type == 'html_block' and token.content:
            m = config.FILE_MARKER_PATTERN.search(token.content)
            if m:
                return m.group(1)
    return None


def apply_definition_list_enhancements(md):
    render_dl_open = previous_rule(md, 'dl_open')
    render_dt_open = previous_rule(md, 'dt_open')
    render_dt_close = previous_rule(md, 'dt_close')

    def dl_open(self, tokens, idx, options, env):
        target = find_target_index(tokens, config.TERMINOLOGY_SECTION_MARKER)
        token = tokens[idx]

        # env is per render(), so only one list per document is classed
        if (target != -1 and idx > target
                and not env.get('terms_list_classed')
                and token.attrGet('class') is None
                and not contains_spec_references(tokens, idx + 1)):
            token.attrSet('class', TERMS_LIST_CLASS)
            env['terms_list_classed'] = True

        mark_empty_dt_elements(tokens, idx + 1)
        return render_dl_open(self, tokens, idx, options, env)

    def dt_open(self, tokens, idx, options, env):
        token = tokens[idx]
        if token.meta.get('is_empty'):
            return ''

        source_file = find_source_file(tokens, idx)
        if source_file:
            token.attrSet('data-sourcefile', source_file)

        types = term_template_types(tokens, idx)
        if 'tref' in types:
            token.attrJoin('class', 'term-external')
        elif 'def' in types:
            token.attrJoin('class', 'term-local')

        return render_dt_open(self, tokens, idx, options, env)

    def dt_close(self, tokens, idx, options, env):
        if tokens[idx].meta.get('is_empty'):
            return ''
        return render_dt_close(self, tokens, idx, options, env)

    md.add_render_rule('dl_open', dl_open)
    md.add_render_rule('dt_open', dt_open)
    md.add_render_rule('dt_close', dt_close)
    return md
