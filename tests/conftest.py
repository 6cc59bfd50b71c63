import json

import pytest
from bs4 import BeautifulSoup

from spec_up import config


@pytest.fixture
def spec(tmp_path):
    """A spec configuration rooted in a temporary directory."""
    data = dict(config.DEFAULT_SPEC)
    data.update({
        "title": "Test Spec",
        "spec_directory": str(tmp_path / "spec"),
        "output_path": str(tmp_path / "docs"),
        "source": {"account": "acme", "repo": "spec-repo", "branch": "main"},
        "external_specs": [{"external_spec": "ext", "gh_page": "https://example.org/ext/"}],
    })
    return data


@pytest.fixture
def state():
    return config.RenderState()


@pytest.fixture
def make_soup():
    def _make(markup):
        return BeautifulSoup(markup, "html.parser")
    return _make


@pytest.fixture
def spec_project(tmp_path):
    """A minimal on-disk project: specs.json, spec.md, a terms dir and one term file."""
    spec_dir = tmp_path / "spec"
    terms_dir = spec_dir / "terms-definitions"
    terms_dir.mkdir(parents=True)

    (spec_dir / "spec.md").write_text(
        "# Test Spec\n\n"
        "## Introduction\n\n"
        "See [[ref: Widget]] and [[ref: missing thing]]. Escaped: \\[[ref: nope]].\n\n"
        "::: note Basic Note\nA note.\n:::\n\n"
        "| a | b |\n|---|---|\n| 1 | 2 |\n",
        encoding="utf-8",
    )
    (spec_dir / "terms-and-definitions-intro.md").write_text(
        "## Terminology\n\n<span id=\"terminology-section-start\"></span>\n",
        encoding="utf-8",
    )
    (terms_dir / "widget.md").write_text(
        "[[def: Widget, gadget]]\n\n~ A thing that does stuff.\n\n"
        "~ | Key | Value |\n  |-----|-------|\n  | owner | acme |\n",
        encoding="utf-8",
    )

    specs = {"specs": [{
        "title": "Test Spec",
        "spec_directory": str(spec_dir),
        "spec_terms_directory": "terms-definitions",
        "output_path": str(tmp_path / "docs"),
        "markdown_paths": ["spec.md", "terms-and-definitions-intro.md"],
        "source": {"account": "acme", "repo": "spec-repo", "branch": "main"},
    }]}
    config_path = tmp_path / "specs.json"
    config_path.write_text(json.dumps(specs), encoding="utf-8")
    return config_path
