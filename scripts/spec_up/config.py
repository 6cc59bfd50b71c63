#!/usr/bin/env python3
"""
Spec-Up configuration and render state.
Shared across all spec_up modules.
"""
import json
import re
from pathlib import Path

# --- CONFIGURATION ---
SPECS_JSON = Path("specs.json")

DEFAULT_SPEC = {
    "title": "Specification",
    "spec_directory": "./spec",
    "spec_terms_directory": "terms-definitions",
    "output_path": "./docs",
    "markdown_paths": ["spec.md"],
    "anchor_symbol": "§",
    "external_specs": [],
}

DEFAULT_BRANCH = "main"

# --- CONSTANTS ---
VERSION_DIR_PATTERN = re.compile(r'^v(\d+)$')
VERSIONS_DIR_NAME = "versions"

TERMINOLOGY_SECTION_MARKER = "terminology-section-start"
TERMS_INTRO_FILE = "terms-and-definitions-intro.md"
FILE_MARKER_PATTERN = re.compile(r'<!-- file: (.+?) -->')

# Font size limits (px) for the +/- buttons
FONT_SIZE_MIN = 10
FONT_SIZE_MAX = 50
FONT_SIZE_STEP = 2

# Notice containers (::: note ... :::)
NOTICE_TYPES = ("note", "issue", "example", "warning", "todo", "informative")

# Content safety guardrails
MIN_CONTENT_LENGTH = 200  # Minimum characters to prevent writing an empty page


class SpecUpError(Exception):
    """Base error for spec_up."""


class SpecConfigError(SpecUpError):
    """specs.json is missing, unreadable or has no specs."""


class RenderState:
    """Definitions and references collected while rendering one spec."""

    def __init__(self, xref_terms=None):
        self.definitions = []
        self.references = []
        # Tag type ("ref" or "iref") of each entry in references
        self.reference_kinds = []
        # {group type: {NAME: corpus entry}} for [[spec...]] tags
        self.spec_groups = {}
        self.xref_terms = dict(xref_terms or {})

    def reset(self):
        self.definitions.clear()
        self.references.clear()
        self.reference_kinds.clear()
        self.spec_groups.clear()


def load_specs_config(path=SPECS_JSON) -> dict:
    """
    Load specs.json and return the first spec merged over DEFAULT_SPEC.

    Raises:
        SpecConfigError: file missing, invalid JSON, or empty "specs" list.
    """
    path = Path(path)
    if not path.exists():
        raise SpecConfigError(f"{path} not found")

    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise SpecConfigError(f"{path} is not valid JSON: {e}") from e

    specs = data.get("specs") if isinstance(data, dict) else None
    if not specs:
        raise SpecConfigError(f"{path} has no entries in \"specs\"")

    spec = dict(DEFAULT_SPEC)
    spec.update(specs[0])

    source = dict(spec.get("source") or {})
    source.setdefault("branch", DEFAULT_BRANCH)
    if not source.get("branch"):
        source["branch"] = DEFAULT_BRANCH
    spec["source"] = source
    return spec


def find_external_spec(spec: dict, key: str):
    """Return the external_specs entry whose "external_spec" equals key, else None."""
    for ext in spec.get("external_specs") or []:
        if ext.get("external_spec") == key:
            return ext
    return None
