#!/usr/bin/env python3
"""
GitHub repository information.
Reads the spec-up-t:github-repo-info meta tag ("account,repo,branch") and
fills in the repository details shown in the settings menu.
"""
from bs4 import BeautifulSoup

META_PROPERTY = 'spec-up-t:github-repo-info'
NOT_AVAILABLE = 'Not available'


def repo_info_meta_content(spec: dict) -> str:
    source = spec.get('source') or {}
    return f"{source.get('account', '')},{source.get('repo', '')},{source.get('branch', '')}"


def get_github_repo_info(soup: BeautifulSoup):
    """Return {'username', 'repo', 'branch'} from the meta tag, or None."""
    meta = soup.find('meta', attrs={'property': META_PROPERTY})
    if meta is None:
        print("  Warning: GitHub repository meta tag not found")
        return None

    content = meta.get('content')
    if not content:
        print("  Warning: GitHub repository meta tag has no content")
        return None

    parts = [p.strip() for p in content.split(',')]
    if len(parts) < 3 or not all(parts[:3]):
        print("  Warning: Invalid GitHub repository meta tag format")
        return None

    return {'username': parts[0], 'repo': parts[1], 'branch': parts[2]}


def github_url(info, path: str = ''):
    if not info:
        return None
    base = f"https://github.com/{info['username']}/{info['repo']}"
    return f"{base}/{path}" if path else base


def current_branch_url(info):
    if not info:
        return None
    return f"https://github.com/{info['username']}/{info['repo']}/tree/{info['branch']}"


def populate_repo_info_in_settings(soup: BeautifulSoup) -> bool:
    """Fill #repo-account, #repo-name, #repo-branch and #repo-url. False if they are missing."""
    account = soup.find(id='repo-account')
    name = soup.find(id='repo-name')
    branch = soup.find(id='repo-branch')
    url = soup.find(id='repo-url')

    if None in (account, name, branch, url):
        print("  Warning: Repository info elements not found in settings menu")
        return False

    info = get_github_repo_info(soup)
    if info:
        account.string = info['username']
        name.string = info['repo']
        branch.string = info['branch']
        url['href'] = github_url(info)
        url['style'] = 'display: inline-block;'
    else:
        for el in (account, name, branch):
            el.string = NOT_AVAILABLE
        url['style'] = 'display: none;'
    return True
