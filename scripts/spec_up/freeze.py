#!/usr/bin/env python3
"""
Freeze the generated spec.

Reads output_path from specs.json, finds the highest vN directory under
<output_path>/versions, copies index.html into v(N+1) and regenerates the
versions index page.
"""
import html
import shutil
from pathlib import Path

from . import config


class FreezeError(config.SpecUpError):
    """Nothing to freeze."""


def list_versions(versions_dir) -> list:
    """Version numbers of the vN directories in versions_dir, ascending."""
    versions_dir = Path(versions_dir)
    if not versions_dir.is_dir():
        return []
    found = []
    for entry in versions_dir.iterdir():
        if not entry.is_dir():
            continue
        m = config.VERSION_DIR_PATTERN.match(entry.name)
        if m:
            found.append(int(m.group(1)))
    return sorted(found)


def next_version(versions_dir) -> int:
    versions = list_versions(versions_dir)
    return (versions[-1] if versions else 0) + 1


def create_versions_index(output_path) -> Path:
    """Write <output_path>/versions/index.html listing every frozen version."""
    versions_dir = Path(output_path) / config.VERSIONS_DIR_NAME
    versions_dir.mkdir(parents=True, exist_ok=True)

    items = "\n".join(
        f'        <li><a href="v{n}/index.html">Version {n}</a></li>'
        for n in list_versions(versions_dir)
    )
    if not items:
        items = '        <li class="no-versions">No frozen versions yet.</li>'

    page = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape('Specification versions')}</title>
</head>
<body>
    <h1>Specification versions</h1>
    <ul class="versions-list">
{items}
    </ul>
    <p><a href="../index.html">Current version</a></p>
</body>
</html>
"""
    index_file = versions_dir / "index.html"
    index_file.write_text(page, encoding='utf-8')
    return index_file


def freeze_spec(config_path=config.SPECS_JSON) -> Path:
    """
    Snapshot index.html into the next version directory.

    Returns:
        Path of the copied file (<output_path>/versions/vN/index.html)

    Raises:
        SpecConfigError: specs.json problems
        FreezeError: no index.html to freeze
    """
    spec = config.load_specs_config(config_path)
    output_path = Path(spec['output_path'])
    source_file = output_path / "index.html"
    if not source_file.is_file():
        raise FreezeError(f"{source_file} not found, render the spec first")

    versions_dir = output_path / config.VERSIONS_DIR_NAME
    versions_dir.mkdir(parents=True, exist_ok=True)

    new_dir = versions_dir / f"v{next_version(versions_dir)}"
    new_dir.mkdir(parents=True, exist_ok=True)

    dest_file = new_dir / "index.html"
    shutil.copyfile(source_file, dest_file)
    print(f"   [Freeze] Created a frozen specification version in {dest_file}")

    create_versions_index(output_path)
    return dest_file
