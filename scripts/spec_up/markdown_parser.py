#!/usr/bin/env python3
"""
Markdown parser factory.
Builds the markdown-it instance used to render a spec: plugins first,
then the spec_up extensions (tables, template tags, definition lists).
"""
import html
import re

from markdown_it import MarkdownIt
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.attrs import attrs_plugin
from mdit_py_plugins.container import container_plugin
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from . import config
from .definition_lists import apply_definition_list_enhancements
from .spec_parser import create_spec_reference_template, load_spec_corpus
from .table_enhancement import apply_table_enhancements
from .template_tags import apply_template_tag_syntax
from .term_parser import create_terminology_template, track_source_files

NOTICE_PARAMS = re.compile(r'(\w+)\s?(.*)?')
NOTICE_LABELS = {'informative': 'INFORMATIVE SECTION'}


def notice_label(type_: str) -> str:
    return NOTICE_LABELS.get(type_, type_.upper())


def validate_notice(params, *args):
    m = NOTICE_PARAMS.match(params.strip())
    return bool(m) and m.group(1) in config.NOTICE_TYPES


def render_notice(self, tokens, idx, options, env):
    token = tokens[idx]
    if token.nesting != 1:
        return '</div>\n'

    m = NOTICE_PARAMS.match(token.info.strip())
    type_ = m.group(1)
    title = (m.group(2) or '').strip()
    if title:
        titles = env.setdefault('notice_titles', {})
        notice_id = re.sub(r'\s+', '-', title).lower()
        if notice_id in titles:
            titles[notice_id] += 1
            notice_id = f"{notice_id}-{titles[notice_id] - 1}"
        else:
            titles[notice_id] = 1
    else:
        counts = env.setdefault('notice_counts', {})
        counts[type_] = counts.get(type_, 0) + 1
        notice_id = f"{type_}-{counts[type_]}"

    notice_id = html.escape(notice_id)
    return (f'<div id="{notice_id}" class="notice {type_}">'
            f'<a class="notice-link" href="#{notice_id}">{notice_label(type_)}</a>')


def create_markdown_parser(spec: dict, state, templates=()) -> MarkdownIt:
    """
    Create the markdown-it instance for one spec.

    Args:
        spec: spec configuration (see config.load_specs_config)
        state: config.RenderState that receives definitions and references
        templates: extra TemplateTag handlers, tried after the terminology and
            spec reference ones
    """
    md = (
        MarkdownIt("commonmark", {"html": True})
        .enable("table")
        .enable("strikethrough")
        .use(attrs_plugin)
        .use(deflist_plugin)
        .use(footnote_plugin)
        .use(tasklists_plugin)
        .use(container_plugin, "notice", validate=validate_notice, render=render_notice)
        .use(
            anchors_plugin,
            min_level=2,
            max_level=4,
            permalink=True,
            permalinkSymbol=spec.get("anchor_symbol") or config.DEFAULT_SPEC["anchor_symbol"],
        )
    )

    apply_table_enhancements(md)
    corpus = load_spec_corpus(spec.get("spec_corpus"))
    builtin = [create_terminology_template(spec, state), create_spec_reference_template(corpus, state)]
    apply_template_tag_syntax(md, builtin + list(templates))
    apply_definition_list_enhancements(md)
    md.core.ruler.after("inline", "track_source_files", track_source_files)
    return md
