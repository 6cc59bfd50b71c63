#!/usr/bin/env python3
"""
Page renderer - unified HTML page generation.
The single source of truth for the spec page skeleton.
"""
import html

from .font_size import font_size_buttons_html


def render_page_html(title: str, body_content: str, toc_html: str = "", spec: dict = None,
                     body_class: str = "", common_head_fn=None, js_footer_fn=None) -> str:
    """
    Unified page renderer - THE ONLY function that creates the spec page skeleton.
    Includes the service menu (font size, downloads), the repository settings
    panel, the TOC sidebar and the content area.

    Args:
        title: Page title
        body_content: Rendered spec HTML
        toc_html: Table of contents HTML
        spec: Spec configuration, passed to common_head_fn
        body_class: Additional CSS class for body element
        common_head_fn: Function(title, spec) generating <head> content
        js_footer_fn: Function generating the script footer
    """
    head_html = common_head_fn(title, spec or {}) if common_head_fn else ""
    js_html = js_footer_fn() if js_footer_fn else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    {head_html}
</head>
<body class="{body_class}">
    <header class="top-bar" id="topbar">
        <div class="page-title">{html.escape(title)}</div>
        <div class="service-menu">
            {font_size_buttons_html()}
        </div>
    </header>
    <div class="repo-info-settings" id="repo-info-settings">
        <span>Account: <span id="repo-account"></span></span>
        <span>Repository: <span id="repo-name"></span></span>
        <span>Branch: <span id="repo-branch"></span></span>
        <a id="repo-url" href="#" target="_blank" rel="noopener" style="display: none;">Open on GitHub</a>
    </div>
    <nav class="toc-container" id="toc">
        {toc_html}
    </nav>
    <main id="content">
        <!-- content-start -->
        {body_content}
        <!-- content-end -->
    </main>
    {js_html}
</body>
</html>
"""
