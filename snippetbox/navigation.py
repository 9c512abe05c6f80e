from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Union


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str
    live: bool = False


def mark_active_links(current_path: str, links: Iterable[Union[NavLink, Mapping]]) -> List[NavLink]:
    """Return the links with ``live`` set on the one pointing at ``current_path``.

    Only the first exact match is marked.
    """
    marked: List[NavLink] = []
    found = False
    for link in links:
        if isinstance(link, Mapping):
            label, href = link["label"], link["href"]
        else:
            label, href = link.label, link.href

        live = not found and href == current_path
        found = found or live
        marked.append(NavLink(label=label, href=href, live=live))
    return marked
