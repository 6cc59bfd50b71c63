from spec_up.button_container import CONTAINER_CLASS, add_button_to_container, get_or_create_button_container
from spec_up.edit_buttons import add_edit_term_buttons, build_edit_buttons_html, find_deepest_term_span
from spec_up.font_size import ensure_font_size_controls, next_font_size
from spec_up.meta_info import (
    COLLAPSED_CLASS,
    INNER_WRAPPER_CLASS,
    LAST_DD_CLASS,
    TARGET_ATTR,
    TOGGLE_CLASS,
    WRAPPER_CLASS,
    collapse_meta_info,
    fix_last_dd,
)
from spec_up.repo_info import (
    NOT_AVAILABLE,
    current_branch_url,
    get_github_repo_info,
    github_url,
    populate_repo_info_in_settings,
)

TERMS = """
<dl class="terms-and-definitions-list">
<dt class="term-local"><span id="term:gadget"><span id="term:widget">Widget</span></span></dt>
<dd>A thing.</dd>
<dd><table><tr><td>owner</td><td>acme</td></tr></table></dd>
<dt>Plain</dt>
<dd>Other thing.</dd>
</dl>
"""

SETTINGS = """
<head><meta property="spec-up-t:github-repo-info" content="{content}"></head>
<div>
<span id="repo-account"></span><span id="repo-name"></span><span id="repo-branch"></span>
<a id="repo-url" href="#"></a>
</div>
"""


# --- button container ---

def test_button_container_is_created_once(make_soup):
    soup = make_soup("<dl><dt>T</dt></dl>")
    dt = soup.dt
    first = get_or_create_button_container(soup, dt)
    assert get_or_create_button_container(soup, dt) is first
    assert len(dt.select(f"div.{CONTAINER_CLASS}")) == 1


def test_add_button_prepend_and_append(make_soup):
    soup = make_soup("<dl><dt>T</dt></dl>")
    dt = soup.dt
    add_button_to_container(soup, dt, soup.new_tag("button", attrs={"id": "b1"}))
    add_button_to_container(soup, dt, soup.new_tag("button", attrs={"id": "b2"}))
    container = add_button_to_container(soup, dt, soup.new_tag("button", attrs={"id": "b0"}), prepend=True)
    assert [b["id"] for b in container.find_all("button")] == ["b0", "b1", "b2"]


# --- meta info ---

def test_collapse_meta_info_wraps_table_dd(make_soup):
    soup = make_soup(TERMS)
    assert collapse_meta_info(soup) == 1

    dd = soup.find_all("dd")[1]
    assert WRAPPER_CLASS in dd["class"]
    assert COLLAPSED_CLASS in dd["class"]
    inner = dd.find("div", class_=INNER_WRAPPER_CLASS, recursive=False)
    assert inner.find("table") is not None

    toggles = soup.dt.select(f"div.{CONTAINER_CLASS} > button.{TOGGLE_CLASS}")
    assert len(toggles) == 1


def test_collapse_meta_info_is_idempotent(make_soup):
    soup = make_soup(TERMS)
    collapse_meta_info(soup)
    assert collapse_meta_info(soup) == 0
    assert len(soup.select(f"button.{TOGGLE_CLASS}")) == 1
    assert len(soup.select(f"div.{INNER_WRAPPER_CLASS}")) == 1


def test_toggle_goes_into_dd_without_dt(make_soup):
    soup = make_soup("<dl><dd><table><tr><td>x</td></tr></table></dd></dl>")
    assert collapse_meta_info(soup) == 1
    children = [c for c in soup.dd.children if getattr(c, "name", None)]
    assert TOGGLE_CLASS in children[0]["class"]
    assert INNER_WRAPPER_CLASS in children[1]["class"]


def test_toggle_targets_its_own_dd(make_soup):
    soup = make_soup(TERMS)
    collapse_meta_info(soup)

    definition, table_dd = soup.find_all("dd")[:2]
    toggle = soup.dt.select_one(f"button.{TOGGLE_CLASS}")
    assert toggle[TARGET_ATTR] == table_dd["id"]
    assert definition.get("id") is None


def test_each_table_dd_gets_a_toggle(make_soup):
    soup = make_soup(
        '<dl><dt>T</dt><dd>Text.</dd>'
        '<dd><table><tr><td>a</td></tr></table></dd>'
        '<dd id="extra"><table><tr><td>b</td></tr></table></dd></dl>'
    )
    assert collapse_meta_info(soup) == 2

    first, second = soup.find_all("dd")[1:]
    toggles = soup.dt.select(f"div.{CONTAINER_CLASS} > button.{TOGGLE_CLASS}")
    assert [t[TARGET_ATTR] for t in toggles] == [first["id"], "extra"]
    assert first["id"] != second["id"]
    assert COLLAPSED_CLASS in first["class"] and COLLAPSED_CLASS in second["class"]


def test_fix_last_dd_marks_group_ends(make_soup):
    soup = make_soup(TERMS)
    assert fix_last_dd(soup) == 2
    marked = [LAST_DD_CLASS in (dd.get("class") or []) for dd in soup.find_all("dd")]
    assert marked == [False, True, True]


def test_fix_last_dd_ignores_other_lists(make_soup):
    soup = make_soup("<dl><dt>a</dt><dd>b</dd></dl>")
    assert fix_last_dd(soup) == 0


# --- edit buttons ---

def test_find_deepest_term_span(make_soup):
    soup = make_soup(TERMS)
    assert find_deepest_term_span(soup.dt)["id"] == "term:widget"


def test_edit_buttons_link_to_term_file(make_soup, spec):
    spec = dict(spec, spec_directory="spec")
    soup = make_soup(TERMS)
    assert add_edit_term_buttons(soup, spec) == 1

    edit = soup.select_one('span[id="term:widget"] a.edit-term-button')
    history = soup.select_one('span[id="term:widget"] a.history-term-button')
    assert edit["href"] == "https://github.com/acme/spec-repo/blob/main/spec/terms-definitions/widget.md"
    assert history["href"] == "https://github.com/acme/spec-repo/commits/main/spec/terms-definitions/widget.md"

    assert add_edit_term_buttons(soup, spec) == 0
    assert len(soup.select("span.edit-term-buttons")) == 1


def test_edit_buttons_default_branch(spec):
    spec = dict(spec, spec_directory="spec", source={"account": "a", "repo": "r"})
    assert "/blob/main/spec/terms-definitions/x.md" in build_edit_buttons_html(spec, "x")


# --- repo info ---

def test_get_github_repo_info(make_soup):
    soup = make_soup(SETTINGS.format(content="acme,spec-repo,dev"))
    info = get_github_repo_info(soup)
    assert info == {"username": "acme", "repo": "spec-repo", "branch": "dev"}
    assert github_url(info) == "https://github.com/acme/spec-repo"
    assert github_url(info, "issues") == "https://github.com/acme/spec-repo/issues"
    assert current_branch_url(info) == "https://github.com/acme/spec-repo/tree/dev"


def test_get_github_repo_info_invalid(make_soup, capsys):
    assert get_github_repo_info(make_soup(SETTINGS.format(content="acme,,"))) is None
    assert get_github_repo_info(make_soup("<p>no meta</p>")) is None
    assert github_url(None) is None
    assert current_branch_url(None) is None
    assert "Warning" in capsys.readouterr().out


def test_populate_repo_info(make_soup):
    soup = make_soup(SETTINGS.format(content="acme,spec-repo,main"))
    assert populate_repo_info_in_settings(soup) is True
    assert soup.find(id="repo-account").string == "acme"
    assert soup.find(id="repo-name").string == "spec-repo"
    assert soup.find(id="repo-branch").string == "main"
    url = soup.find(id="repo-url")
    assert url["href"] == "https://github.com/acme/spec-repo"
    assert url["style"] == "display: inline-block;"


def test_populate_repo_info_without_info(make_soup):
    soup = make_soup(SETTINGS.format(content=""))
    assert populate_repo_info_in_settings(soup) is True
    assert soup.find(id="repo-account").string == NOT_AVAILABLE
    assert soup.find(id="repo-url")["style"] == "display: none;"


def test_populate_repo_info_missing_elements(make_soup):
    assert populate_repo_info_in_settings(make_soup("<p>none</p>")) is False


# --- font size ---

def test_next_font_size_respects_limits():
    assert next_font_size(16, 2) == 18
    assert next_font_size(16, -2) == 14
    assert next_font_size(50, 2) == 50
    assert next_font_size(10, -2) == 10
    assert next_font_size(48, 2) == 50


def test_font_size_controls_added_once(make_soup):
    soup = make_soup('<div class="service-menu"></div>')
    assert ensure_font_size_controls(soup) is True
    assert ensure_font_size_controls(soup) is False
    assert [b["id"] for b in soup.select(".service-menu > button")] == ["decreaseBtn", "increaseBtn"]


def test_font_size_controls_need_menu(make_soup):
    assert ensure_font_size_controls(make_soup("<p>x</p>")) is False
