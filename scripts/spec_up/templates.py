#!/usr/bin/env python3
"""
Head and footer fragments for the spec page.
Passed to page_renderer.render_page_html().
"""
import html
from datetime import datetime, timezone

from .font_size import font_size_script
from .highlight import HIGHLIGHT_CLASS
from .meta_info import COLLAPSED_CLASS, TARGET_ATTR, TOGGLE_CLASS
from .repo_info import META_PROPERTY, repo_info_meta_content

PAGE_STYLES = f"""
    body {{ font-family: system-ui, -apple-system, "Segoe UI", Roboto, sans-serif; line-height: 1.6; }}
    .service-menu {{ display: flex; gap: 0.25rem; align-items: center; }}
    .table-responsive-md {{ overflow-x: auto; }}
    dl.terms-and-definitions-list > dt {{ font-weight: 700; margin-top: 1rem; }}
    dl.terms-and-definitions-list > dd.last-dd {{ margin-bottom: 1.5rem; }}
    .definition-buttons-container {{ display: inline-flex; gap: 0.25rem; float: right; }}
    .meta-info-content-wrapper.{COLLAPSED_CLASS} .meta-info-inner-wrapper {{ display: none; }}
    .{HIGHLIGHT_CLASS} {{ background: #fff8d6; border-left: 4px solid #f0c000; padding-left: 0.75rem; }}
    .term-reference {{ text-decoration: underline dotted; }}
    .notice {{ border-left: 4px solid #888; padding: 0.5rem 1rem; margin: 1rem 0; }}
    .header-anchor {{ margin-left: 0.35rem; text-decoration: none; opacity: 0.4; }}
"""


def get_common_head(title: str, spec: dict) -> str:
    build_time = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    return f"""
    <!-- BUILD_STAMP: {build_time} -->
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="generator" content="spec_up">
    <meta property="{META_PROPERTY}" content="{html.escape(repo_info_meta_content(spec))}">
    <title>{html.escape(title)}</title>
    <style>{PAGE_STYLES}</style>"""


def get_js_footer() -> str:
    return f"""
    <script>
    {font_size_script()}
    document.addEventListener('DOMContentLoaded', () => {{
        // Meta info toggles (markup is added at build time)
        document.querySelectorAll('.{TOGGLE_CLASS}').forEach((button) => {{
            button.addEventListener('click', (e) => {{
                e.preventDefault();
                e.stopPropagation();
                // Each button names its own dd
                const target = button.getAttribute('{TARGET_ATTR}');
                const dd = (target && document.getElementById(target)) || button.closest('dd');
                if (dd) dd.classList.toggle('{COLLAPSED_CLASS}');
            }});
        }});
    }});

    // Heading highlight on anchor, same rules as spec_up.highlight
    function headingLevel(el) {{
        const m = el && /^H([1-6])$/.exec(el.tagName);
        return m ? parseInt(m[1], 10) : null;
    }}
    function highlightHeadingSection(hash) {{
        if (!hash || hash.length < 2 || hash[0] !== '#') return false;
        const target = document.getElementById(decodeURIComponent(hash.slice(1)));
        const level = headingLevel(target);
        if (!level || level < 2) return false;
        document.querySelectorAll('div.{HIGHLIGHT_CLASS}').forEach((w) => w.replaceWith(...w.childNodes));
        const nodes = [target];
        let next = target.nextElementSibling;
        while (next) {{
            const l = headingLevel(next);
            if (l !== null && l <= level) break;
            nodes.push(next);
            next = next.nextElementSibling;
        }}
        const wrapper = document.createElement('div');
        wrapper.className = '{HIGHLIGHT_CLASS}';
        target.parentNode.insertBefore(wrapper, target);
        nodes.forEach((n) => wrapper.appendChild(n));
        return true;
    }}
    window.addEventListener('hashchange', () => highlightHeadingSection(window.location.hash));
    document.addEventListener('DOMContentLoaded', () => highlightHeadingSection(window.location.hash));
    </script>"""
