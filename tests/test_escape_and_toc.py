from spec_up.escape_protection import (
    ESCAPED_PLACEHOLDER,
    post_process_escapes,
    pre_process_escapes,
    process_with_escapes,
)
from spec_up.markdown_parser import create_markdown_parser
from spec_up.toc_extractor import extract_headings, extract_toc_from_body


def test_escapes_are_hidden_and_restored():
    hidden = pre_process_escapes(r"Write \[[def: x]] literally")
    assert hidden == f"Write {ESCAPED_PLACEHOLDER}def: x]] literally"
    assert post_process_escapes(hidden) == "Write [[def: x]] literally"


def test_empty_content_passes_through():
    assert pre_process_escapes("") == ""
    assert post_process_escapes(None) is None
    assert process_with_escapes("", lambda s: "changed") == ""


def test_escaped_tag_is_not_parsed(spec, state):
    md = create_markdown_parser(spec, state)
    out = process_with_escapes(r"Use \[[ref: Widget]] to link. [[ref: Gadget]]", md.render)

    assert "[[ref: Widget]]" in out
    assert ESCAPED_PLACEHOLDER not in out
    assert state.references == ["Gadget"]


def test_extract_headings_strips_permalinks_and_skips_levels():
    body = ('<h1 id="top">Top</h1>'
            '<h2 id="a">A <a class="header-anchor" href="#a">§</a></h2>'
            '<h5 id="deep">Deep</h5>'
            '<h3 id="b">B &amp; C</h3>')
    assert extract_headings(body) == [(2, "a", "A"), (3, "b", "B & C")]


def test_toc_nests_and_closes_lists():
    body = '<h2 id="a">A</h2><h3 id="b">B</h3><h2 id="c">C &amp; D</h2>'
    assert extract_toc_from_body(body) == (
        '<ul class="toc">'
        '<li><a href="#a">A</a><ul><li><a href="#b">B</a></li></ul></li>'
        '<li><a href="#c">C &amp; D</a></li>'
        '</ul>'
    )


def test_toc_skipped_level_nests_once():
    body = '<h2 id="a">A</h2><h4 id="d">D</h4><h3 id="c">C</h3>'
    assert extract_toc_from_body(body) == (
        '<ul class="toc">'
        '<li><a href="#a">A</a><ul><li><a href="#d">D</a></li><li><a href="#c">C</a></li></ul></li>'
        '</ul>'
    )


def test_toc_empty_without_headings():
    assert extract_toc_from_body("<p>No headings</p>") == ""
