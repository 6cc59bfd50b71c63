import json

import pytest
from bs4 import BeautifulSoup

from spec_up import config
from spec_up.markdown_parser import create_markdown_parser
from spec_up.spec_parser import (
    SPEC_NAME_TYPES,
    find_spec_in_corpus,
    load_spec_corpus,
    normalize_spec_name,
    render_ref_group,
)

CORPUS = {
    "RFC2119": {
        "title": "Key words for use in RFCs to Indicate Requirement Levels",
        "href": "https://www.rfc-editor.org/rfc/rfc2119",
        "authors": ["S. Bradner"],
        "rawDate": "March 1997",
        "status": "Best Current Practice",
    },
    "did-core": {
        "title": "Decentralized Identifiers (DIDs) v1.0",
        "href": "https://www.w3.org/TR/did-core/",
        "authors": ["Manu Sporny", "Dave Longley"],
        "rawDate": "19 July 2022",
        "status": "REC",
    },
}


@pytest.fixture
def corpus_spec(spec, tmp_path):
    path = tmp_path / "refs.json"
    path.write_text(json.dumps(CORPUS), encoding="utf-8")
    spec["spec_corpus"] = str(path)
    return spec


def render(spec, state, src):
    return create_markdown_parser(spec, state).render(src)


def test_spec_name_types():
    for type_ in ("spec", "SPEC", "spec-normative", "spec-informative", "specinformative"):
        assert SPEC_NAME_TYPES.match(type_)
    for type_ in ("specs normative", "ref", "xspec"):
        assert not SPEC_NAME_TYPES.match(type_)


def test_normalize_and_lookup():
    assert normalize_spec_name(" rfc  2119 ") == "RFC-2119"
    assert find_spec_in_corpus(CORPUS, "rfc2119") is CORPUS["RFC2119"]
    assert find_spec_in_corpus(CORPUS, "DID Core") is CORPUS["did-core"]
    assert find_spec_in_corpus(CORPUS, "nothing") is None


def test_named_reference_links_to_group_entry(corpus_spec, state):
    out = render(corpus_spec, state, "Per [[spec: RFC2119]].\n")
    assert 'Per [<a class="spec-reference" href="#ref:RFC2119">RFC2119</a>].' in out
    assert list(state.spec_groups) == ["spec"]
    assert state.spec_groups["spec"]["RFC2119"]["_name"] == "RFC2119"


def test_group_lists_references_sorted(corpus_spec, state):
    src = (
        "Uses [[spec-normative: rfc2119]] and [[spec-normative: DID Core]].\n\n"
        "## Normative References\n\n"
        "[[spec-normative]]\n"
    )
    soup = BeautifulSoup(render(corpus_spec, state, src), "html.parser")

    dl = soup.select_one("dl.reference-list")
    assert "terms-and-definitions-list" not in dl.get("class", [])
    assert [dt["id"] for dt in dl.find_all("dt")] == ["ref:DID-CORE", "ref:RFC2119"]

    first = dl.find("dd")
    assert first.cite.a["href"] == "https://www.w3.org/TR/did-core/"
    assert "Manu Sporny; Dave Longley; 19 July 2022." in first.get_text()
    assert first.select_one("span.reference-status").get_text() == "Status: REC"


def test_groups_are_separate(corpus_spec, state):
    out = render(corpus_spec, state, "[[spec-informative: RFC2119]]\n\n[[spec-normative]]\n")
    assert "reference-list" not in out
    assert list(state.spec_groups) == ["spec-informative"]


def test_unknown_reference_is_shown_as_written(corpus_spec, state, capsys):
    out = render(corpus_spec, state, "See [[spec: RFC 9999]].\n")
    assert "<p>See [[spec: RFC 9999]].</p>" in out
    assert state.spec_groups == {}
    assert "[[spec: RFC 9999]] is not in the reference corpus" in capsys.readouterr().out


def test_without_corpus_tags_are_shown_as_written(spec, state):
    out = render(spec, state, "[[spec: RFC2119]]\n")
    assert "[[spec: RFC2119]]" in out
    assert "spec-reference" not in out


def test_group_html_is_escaped():
    groups = {"spec": {"A<B": {"title": "<x>", "href": "https://e.org/?a=1&b=2", "authors": [], "rawDate": "", "status": ""}}}
    out = render_ref_group("spec", groups)
    assert '<dt id="ref:A&lt;B">A&lt;B</dt>' in out
    assert 'href="https://e.org/?a=1&amp;b=2"' in out
    assert "<x>" not in out
    assert render_ref_group("spec-normative", groups) == ""


def test_load_spec_corpus(tmp_path):
    assert load_spec_corpus(None) == {}

    with pytest.raises(config.SpecConfigError):
        load_spec_corpus(tmp_path / "absent.json")

    bad = tmp_path / "refs.json"
    bad.write_text("{", encoding="utf-8")
    with pytest.raises(config.SpecConfigError, match="not valid JSON"):
        load_spec_corpus(bad)

    bad.write_text("[]", encoding="utf-8")
    with pytest.raises(config.SpecConfigError):
        load_spec_corpus(bad)
