"""Turn match results into launcher items."""

from __future__ import annotations

import json
from typing import Iterable, List, Optional, TextIO
from urllib.parse import urlencode

from .types import Item, Result

GITHUB_URL = "https://github.com"


def generate_items(result: Result, *, issue_title: Optional[str] = None) -> List[Item]:
    """Build the launcher items for a match result.

    An empty result produces no items.
    """
    items: List[Item] = []
    if result.repository:
        if result.query:
            items.append(_search_repository_item(result))
        else:
            items.append(_open_repository_item(result, issue_title))
    elif result.user:
        if result.query:
            items.append(_search_item(f"user:{result.user} {result.query}"))
        else:
            items.append(_open_user_item(result))
    elif result.query:
        items.append(_search_item(result.query))
    return items


def _shorthand_suffix(result: Result) -> str:
    shorthand = result.repository_shorthand or result.user_shorthand
    return f" ({shorthand})" if shorthand else ""


def _open_repository_item(result: Result, issue_title: Optional[str]) -> Item:
    uid = f"gh:{result.repository}"
    title = f"Open {result.repository}"
    url = f"{GITHUB_URL}/{result.repository}"

    if result.issue:
        uid += f"#{result.issue}"
        title += f"#{result.issue}"
        url += f"/issues/{result.issue}"

    if result.path:
        uid += result.path
        title += result.path
        url += result.path

    return Item(
        uid=uid,
        title=title + _shorthand_suffix(result) + " on GitHub",
        arg=f"open {url}",
        subtitle=issue_title if result.issue else None,
    )


def _open_user_item(result: Result) -> Item:
    return Item(
        uid=f"gh:{result.user}",
        title=f"Open {result.user}{_shorthand_suffix(result)} on GitHub",
        arg=f"open {GITHUB_URL}/{result.user}",
    )


def _search_repository_item(result: Result) -> Item:
    params = urlencode({"q": result.query, "type": "Issues"})
    return Item(
        uid=f"ghs:{result.repository}",
        title=f"Search issues in {result.repository}{_shorthand_suffix(result)} for {result.query}",
        arg=f"open {GITHUB_URL}/{result.repository}/search?{params}",
        autocomplete=result.repository_shorthand or result.repository,
    )


def _search_item(search: str) -> Item:
    params = urlencode({"q": search})
    return Item(
        uid=f"ghs:{search}",
        title=f"Search GitHub for {search}",
        arg=f"open {GITHUB_URL}/search?{params}",
    )


def _item_to_dict(item: Item) -> dict:
    payload = {
        "uid": item.uid,
        "title": item.title,
        "arg": item.arg,
        "valid": item.valid,
    }
    if item.subtitle:
        payload["subtitle"] = item.subtitle
    if item.autocomplete:
        payload["autocomplete"] = item.autocomplete
    return payload


def serialize_items(items: Iterable[Item]) -> dict:
    return {"items": [_item_to_dict(item) for item in items]}


def render_items(items: Iterable[Item], stream: TextIO) -> None:
    json.dump(serialize_items(items), stream)
    stream.write("\n")
