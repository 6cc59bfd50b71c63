#!/usr/bin/env python3
"""
Spec-Up Package for Specification Documents
============================================

This package turns a set of Markdown files, described by specs.json,
into a single-page HTML specification with a terminology section,
term references, notices, a table of contents and page tooling.

Modules:
    - config: specs.json loading, constants and render state
    - escape_protection: \\[[ escape handling around rendering
    - template_tags: [[type: args]] inline syntax for markdown-it
    - term_parser: def/ref/iref/xref/tref handling
    - spec_parser: [[spec...]] references against a reference corpus
    - table_enhancement / definition_lists: render rule overrides
    - markdown_parser: the configured MarkdownIt instance
    - toc_extractor, page_renderer, templates: page assembly
    - enhance (+ meta_info, edit_buttons, repo_info, font_size,
      download_links, highlight, button_container): page enhancements
    - renderer: full render pipeline
    - freeze, bump_version, copy_assets: build tasks

Usage:
    from spec_up import run
    run("render")                 # Render using ./specs.json

    # Or from the shell:
    spec-up freeze --config specs.json
"""

__version__ = "1.0.0"
__author__ = "Spec-Up Team"

import sys


def run(command: str = "render", config_path: str = "specs.json", **options):
    """
    Run one build task.

    Args:
        command: render | freeze | bump | copy-assets | highlight
        config_path: path of specs.json
        options: task specific (part, package_file, src, output, anchor, out_file)
    """
    from . import config
    from .bump_version import bump_version
    from .copy_assets import copy_assets
    from .freeze import freeze_spec
    from .renderer import highlight_page, render_spec

    if command == "render":
        return render_spec(config.load_specs_config(config_path))
    if command == "freeze":
        return freeze_spec(config_path)
    if command == "bump":
        return bump_version(options.get('package_file', "package.json"), options.get('part', 'patch'))
    if command == "copy-assets":
        output = options.get('output') or config.load_specs_config(config_path)['output_path']
        return copy_assets(options.get('src', "assets"), output)
    if command == "highlight":
        spec = config.load_specs_config(config_path)
        index_file = f"{spec['output_path']}/index.html"
        return highlight_page(index_file, options['anchor'], options.get('out_file'))
    raise config.SpecUpError(f"Unknown command {command!r}")


def run_with_args(argv=None) -> int:
    """
    Run a build task from command-line arguments.
    This is the CLI entry point. Returns the process exit code.
    """
    import argparse

    from .config import SpecUpError

    parser = argparse.ArgumentParser(
        prog="spec-up",
        description="Build single-page HTML specifications from Markdown.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    spec-up render                          # Render ./specs.json
    spec-up freeze                          # Snapshot index.html into versions/vN
    spec-up bump minor                      # Bump package.json version
    spec-up copy-assets --src assets        # Copy assets into the output
    spec-up highlight '#terminology'        # Highlight a section in index.html
        """
    )
    parser.add_argument("--config", default="specs.json", help="Path of specs.json")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("render", help="Render the spec to <output_path>/index.html")
    sub.add_parser("freeze", help="Freeze index.html into the next versions/vN directory")

    bump = sub.add_parser("bump", help="Bump the version in package.json")
    bump.add_argument("part", nargs="?", default="patch", help="major, minor, patch or X.Y.Z")
    bump.add_argument("--file", dest="package_file", default="package.json")

    assets = sub.add_parser("copy-assets", help="Copy static assets into the output directory")
    assets.add_argument("--src", default="assets")
    assets.add_argument("--output", default=None, help="Defaults to output_path from specs.json")

    highlight = sub.add_parser("highlight", help="Highlight the section under a heading anchor")
    highlight.add_argument("anchor", help="Heading anchor, e.g. '#terminology'")
    highlight.add_argument("--out", dest="out_file", default=None, help="Write to this file instead of in place")

    args = parser.parse_args(argv)
    options = {k: v for k, v in vars(args).items() if k not in ("command", "config")}
    try:
        result = run(args.command, args.config, **options)
    except SpecUpError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    if args.command == "highlight" and result is False:
        return 2
    return 0


def main() -> None:
    sys.exit(run_with_args())


# Export key functions and classes for direct imports
from .config import (
    SpecUpError,
    SpecConfigError,
    RenderState,
    load_specs_config,
)

from .escape_protection import (
    pre_process_escapes,
    post_process_escapes,
    process_with_escapes,
)

from .template_tags import (
    TemplateTag,
    apply_template_tag_syntax,
)

from .term_parser import (
    process_xtref_object,
    find_unresolved_references,
)

from .spec_parser import (
    load_spec_corpus,
)

from .markdown_parser import (
    create_markdown_parser,
)

from .enhance import (
    enhance_soup,
    enhance_html,
)

from .highlight import (
    highlight_heading_section,
)

from .renderer import (
    render_spec,
    highlight_page,
)

from .freeze import (
    FreezeError,
    freeze_spec,
    create_versions_index,
)

from .bump_version import (
    increment_version,
    bump_version,
)

from .copy_assets import (
    copy_assets,
)


__all__ = [
    # Main entry points
    'run',
    'run_with_args',
    'main',
    # Config
    'SpecUpError',
    'SpecConfigError',
    'RenderState',
    'load_specs_config',
    # Escapes
    'pre_process_escapes',
    'post_process_escapes',
    'process_with_escapes',
    # Markdown
    'TemplateTag',
    'apply_template_tag_syntax',
    'process_xtref_object',
    'find_unresolved_references',
    'load_spec_corpus',
    'create_markdown_parser',
    # Page
    'enhance_soup',
    'enhance_html',
    'highlight_heading_section',
    'render_spec',
    'highlight_page',
    # Build tasks
    'FreezeError',
    'freeze_spec',
    'create_versions_index',
    'increment_version',
    'bump_version',
    'copy_assets',
]
