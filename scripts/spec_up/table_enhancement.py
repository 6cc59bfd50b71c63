#!/usr/bin/env python3
"""
Table enhancement for markdown-it.
Adds Bootstrap classes to every <table> and wraps it in a responsive container.
"""

TABLE_CLASSES = ('table', 'table-striped', 'table-bordered', 'table-hover')
RESPONSIVE_WRAPPER = '<div class="table-responsive-md">'


def previous_rule(md, name):
    """Return the current renderer rule for name, or the default renderToken."""
    rule = md.renderer.rules.get(name)
    if rule is not None:
        return lambda self, tokens, idx, options, env: rule(tokens, idx, options, env)
    return lambda self, tokens, idx, options, env: self.renderToken(tokens, idx, options, env)


def add_classes(token, classes):
    """Append classes to token's class attribute, skipping ones already present."""
    existing = str(token.attrGet('class') or '')
    present = existing.split()
    missing = [c for c in classes if c not in present]
    if not missing:
        return
    token.attrSet('class', ' '.join(present + missing))


def apply_table_enhancements(md):
    render_table_open = previous_rule(md, 'table_open')
    render_table_close = previous_rule(md, 'table_close')

    def table_open(self, tokens, idx, options, env):
        add_classes(tokens[idx], TABLE_CLASSES)
        return RESPONSIVE_WRAPPER + render_table_open(self, tokens, idx, options, env)

    def table_close(self, tokens, idx, options, env):
        return render_table_close(self, tokens, idx, options, env) + '</div>'

    md.add_render_rule('table_open', table_open)
    md.add_render_rule('table_close', table_close)
    return md
