#!/usr/bin/env python3
"""
Template-tag syntax for markdown-it.

Adds [[type:arg1,arg2,...]] constructs to the inline parser, e.g.
[[def: term, alias]], [[ref: term]], [[tref: spec, term]].

Parsing pushes a "template" token whose meta holds the tag type, the
handler that owns it and the split arguments. Rendering asks the handler
for the final HTML.
"""
import html
import re

LEVELS = 2
OPEN_STRING = '[' * LEVELS
CLOSE_STRING = ']' * LEVELS

CONTENT_PATTERN = re.compile(r'\s*([^\s\[\]:]+):?\s*([^\]\n]+)?', re.IGNORECASE)
ARGS_SEPARATOR = re.compile(r'\s*,+\s*')


class TemplateTag:
    """
    Handler for one family of template tags.

    Args:
        filter: callable(type) -> bool, True if this handler owns the type
        parse: optional callable(token, type, *args) -> str, run once while parsing;
               a truthy result replaces token.content
        render: optional callable(token, type, *args) -> str; any result other
                than None is the rendered HTML
    """

    def __init__(self, filter, parse=None, render=None):
        self.filter = filter
        self.parse = parse
        self.render = render


def split_args(raw):
    if not raw:
        return []
    return ARGS_SEPARATOR.split(raw.strip())


def find_template(templates, type_):
    for template in templates:
        if template.filter(type_):
            return template
    return None


def apply_template_tag_syntax(md, templates=()):
    """Register the [[...]] inline rule and its renderer on a MarkdownIt instance."""
    templates = list(templates)

    def templates_rule(state, silent):
        start = state.pos
        if state.src[start:start + LEVELS] != OPEN_STRING:
            return False

        closing = state.src.find(CLOSE_STRING, start + LEVELS, state.posMax)
        if closing < 0:
            return False

        m = CONTENT_PATTERN.match(state.src[start + LEVELS:closing])
        if not m:
            return False

        type_ = m.group(1)
        template = find_template(templates, type_)
        if template is None:
            return False

        if not silent:
            args = split_args(m.group(2))
            token = state.push('template', '', 0)
            token.content = m.group(0)
            token.meta = {'type': type_, 'template': template, 'args': args}
            if template.parse:
                parsed = template.parse(token, type_, *args)
                if parsed:
                    token.content = parsed
                    token.meta['parsed'] = True

        state.pos = closing + LEVELS
        return True

    md.inline.ruler.after('emphasis', 'templates', templates_rule)

    def render_template(self, tokens, idx, options, env):
        token = tokens[idx]
        template = token.meta['template']
        if template.render:
            result = template.render(token, token.meta['type'], *token.meta['args'])
            if result is not None:
                return result
        if token.meta.get('parsed'):
            return token.content
        # Unhandled tags are shown as written
        return OPEN_STRING + html.escape(token.content) + CLOSE_STRING

    md.add_render_rule('template', render_template)
    return md
