#!/usr/bin/env python3
"""
Spec renderer.
Reads the markdown sources of a spec, renders them with the spec_up
markdown parser, wraps the result in the page skeleton, applies the page
enhancements and writes <output_path>/index.html.
"""
from pathlib import Path

from bs4 import BeautifulSoup
from tqdm import tqdm

from . import config
from .enhance import enhance_soup
from .escape_protection import process_with_escapes
from .freeze import create_versions_index
from .markdown_parser import create_markdown_parser
from .page_renderer import render_page_html
from .templates import get_common_head, get_js_footer
from .term_parser import find_unresolved_reference_tags
from .toc_extractor import extract_toc_from_body
from .utils import discover_markdown_paths, read_file_text, validate_output_safety


class RenderError(config.SpecUpError):
    """The rendered page failed the output safety checks."""


def load_markdown(spec: dict) -> str:
    """Concatenate the spec's markdown files, each preceded by a file marker comment."""
    spec_dir = Path(spec['spec_directory'])
    parts = []
    for rel in tqdm(discover_markdown_paths(spec), desc="Reading markdown", unit="file"):
        path = spec_dir / rel
        if not path.is_file():
            raise config.SpecConfigError(f"Markdown file {path} listed in markdown_paths not found")
        parts.append(f"<!-- file: {rel} -->\n\n{read_file_text(path)}")
    return "\n\n".join(parts)


def render_markdown(spec: dict, source: str, state=None) -> str:
    """Render markdown source to HTML, recording terms on state."""
    state = state if state is not None else config.RenderState()
    state.reset()
    md = create_markdown_parser(spec, state)
    return process_with_escapes(source, md.render)


def render_spec(spec: dict, state=None, download_base=None, session=None) -> Path:
    """
    Render one spec to <output_path>/index.html.

    Args:
        spec: spec configuration (config.load_specs_config)
        state: optional config.RenderState, filled with definitions and references
        download_base: where to probe for index.pdf/index.docx (default: output_path)
        session: optional requests.Session for remote probes

    Returns:
        Path of the written index.html
    """
    state = state if state is not None else config.RenderState()
    title = spec.get('title') or config.DEFAULT_SPEC['title']
    output_path = Path(spec['output_path'])
    print(f"--> Rendering: {title}")

    body = render_markdown(spec, load_markdown(spec), state)
    toc_html = extract_toc_from_body(body)
    page = render_page_html(title, body, toc_html, spec,
                            common_head_fn=get_common_head, js_footer_fn=get_js_footer)

    soup = BeautifulSoup(page, 'html.parser')
    summary = enhance_soup(
        soup, spec,
        download_base=output_path if download_base is None else download_base,
        session=session,
    )
    page = str(soup)

    ok, message = validate_output_safety(page, "index.html")
    if not ok:
        raise RenderError(message)

    output_path.mkdir(parents=True, exist_ok=True)
    index_file = output_path / "index.html"
    index_file.write_text(page, encoding='utf-8')
    create_versions_index(output_path)

    print(f"   [Render] {len(state.definitions)} definitions, {len(state.references)} references, "
          f"{summary['meta_info']} meta info panels")
    for kind, ref in find_unresolved_reference_tags(state):
        print(f"  Warning: [[{kind}: {ref}]] does not match any [[def]] term or alias")

    print(f"   [DONE] {index_file}")
    return index_file


def highlight_page(page_file, anchor: str, out_file=None) -> bool:
    """
    Highlight the section under anchor in a rendered page, writing the result
    to out_file (default: in place). Returns False when the anchor is not a heading.
    """
    from .highlight import highlight_heading_section

    page_file = Path(page_file)
    if not page_file.is_file():
        raise config.SpecUpError(f"{page_file} not found, render the spec first")

    soup = BeautifulSoup(read_file_text(page_file), 'html.parser')
    if not highlight_heading_section(soup, anchor):
        print(f"  Warning: {anchor} does not point to a heading in {page_file}")
        return False

    out_file = Path(out_file) if out_file else page_file
    out_file.write_text(str(soup), encoding='utf-8')
    print(f"   [Highlight] {anchor} -> {out_file}")
    return True
