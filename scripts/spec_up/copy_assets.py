#!/usr/bin/env python3
"""
Asset deployment: copy a static asset tree into <output_path>/assets.
"""
import shutil
from pathlib import Path

ASSETS_DIR_NAME = "assets"


def copy_assets(src_dir, output_path) -> int:
    """
    Copy every file under src_dir to <output_path>/assets, keeping the layout
    and overwriting existing files. Returns the number of files copied.
    """
    src_dir = Path(src_dir)
    if not src_dir.is_dir():
        print(f"  Warning: asset directory {src_dir} not found, nothing copied")
        return 0

    dest_root = Path(output_path) / ASSETS_DIR_NAME
    copied = 0
    for src in sorted(src_dir.rglob('*')):
        if not src.is_file() or src.is_symlink():
            continue
        dst = dest_root / src.relative_to(src_dir)
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst)
        copied += 1

    print(f"   [Assets] Copied {copied} files to {dest_root}")
    return copied
