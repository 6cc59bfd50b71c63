#!/usr/bin/env python3
"""
Version counter bump for package.json-style files.
Same rules as `npm version major|minor|patch`, or an explicit X.Y.Z.
"""
import json
import re
from pathlib import Path

from . import config

SEMVER = re.compile(r'^v?(\d+)\.(\d+)\.(\d+)(?:-([0-9A-Za-z.-]+))?$')
PARTS = ('major', 'minor', 'patch')


class VersionError(config.SpecUpError):
    """Unparseable version or unknown bump."""


def increment_version(version: str, part: str = 'patch') -> str:
    m = SEMVER.match(version.strip())
    if not m:
        raise VersionError(f"Not a semantic version: {version!r}")
    major, minor, patch = (int(x) for x in m.group(1, 2, 3))
    pre = m.group(4)

    if part == 'major':
        # 2.0.0-rc.1 -> 2.0.0
        if pre and minor == 0 and patch == 0:
            return f"{major}.0.0"
        return f"{major + 1}.0.0"
    if part == 'minor':
        if pre and patch == 0:
            return f"{major}.{minor}.0"
        return f"{major}.{minor + 1}.0"
    if part == 'patch':
        if pre:
            return f"{major}.{minor}.{patch}"
        return f"{major}.{minor}.{patch + 1}"

    explicit = SEMVER.match(part)
    if explicit:
        return part.lstrip('v')
    raise VersionError(f"Unknown version bump {part!r}, expected one of {', '.join(PARTS)} or X.Y.Z")


def bump_version(path="package.json", part: str = 'patch') -> str:
    """Bump the "version" key of a JSON file in place. Returns the new version."""
    path = Path(path)
    if not path.is_file():
        raise VersionError(f"{path} not found")

    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise VersionError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise VersionError(f"{path} does not hold a JSON object")

    old = data.get('version', '0.0.0')
    new = increment_version(old, part)
    data['version'] = new
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding='utf-8')
    print(f"   [Version] {old} -> {new}")
    return new
