#!/usr/bin/env python3
"""
Spec-Up Build Runner
====================

Renders Markdown specifications described by specs.json into a single
HTML page, and runs the related build tasks.

Usage:
    python run_spec_up.py render                 # Render ./specs.json
    python run_spec_up.py --config my.json render
    python run_spec_up.py freeze                 # Snapshot into versions/vN
    python run_spec_up.py bump minor             # Bump package.json

Features:
    - Terminology section with def/ref/xref/tref term references
    - Notices, responsive tables and a table of contents
    - Edit/history buttons and collapsible meta info per term
    - PDF/DOCX download buttons when the files exist
    - Frozen versions with a versions index
"""

import sys
import os

# Ensure the scripts directory is in the path
script_dir = os.path.dirname(os.path.abspath(__file__))
if script_dir not in sys.path:
    sys.path.insert(0, script_dir)


def main():
    """Main entry point for the build runner."""
    from spec_up import run_with_args
    return run_with_args()


if __name__ == "__main__":
    sys.exit(main())
