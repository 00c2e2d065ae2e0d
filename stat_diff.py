"""stat_diff.py

Detect match outcomes between two saves of a stats tree.

A stats tree looks like::

    {"name": "All Maps", "children": [
        {"name": "Push", "children": [
            {"name": "Colosseo", "children": [
                {"name": "won", "size": 2},
                {"name": "lost", "size": 1},
                {"name": "draw", "size": 0},
            ]},
        ]},
    ]}

Rules
-----
- Old and new trees are walked together *by position*, not by name. Extra
  children on the longer side are ignored.
- A node named won/lost/draw whose ``size`` is numeric on both sides is a stat
  leaf. A leaf whose size grew yields one StatChange; the walk stops there.
- Path depth 1 is the category, depth 2 the map. Shallower trees get "Unknown".
- Output order is detection order (depth-first, left to right). It is not a
  causal or temporal order across leaves.

This module is pure: it does not touch the filesystem.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence

STAT_RESULTS = ("won", "lost", "draw")
UNKNOWN = "Unknown"


@dataclass(frozen=True)
class StatChange:
    category: str
    map_name: str
    result: str
    old_value: float
    new_value: float

    @property
    def increase(self) -> float:
        return self.new_value - self.old_value

    @property
    def match_count(self) -> int:
        """Number of log lines this change stands for (one per whole match)."""
        return max(0, math.ceil(self.increase))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "mapName": self.map_name,
            "result": self.result,
            "oldValue": self.old_value,
            "newValue": self.new_value,
            "increase": self.increase,
        }


def _is_number(value: Any) -> bool:
    # bool is an int subclass; a True/False "size" is not a counter. Neither is inf/nan.
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _children(node: Mapping[str, Any]) -> Sequence[Any] | None:
    kids = node.get("children")
    if isinstance(kids, (list, tuple)):
        return kids
    return None


def _is_stat_leaf(old_node: Mapping[str, Any], new_node: Mapping[str, Any]) -> bool:
    return (
        old_node.get("name") in STAT_RESULTS
        and _is_number(old_node.get("size"))
        and _is_number(new_node.get("size"))
    )


def detect_stat_changes(old_tree: Any, new_tree: Any) -> List[StatChange]:
    """Return every stat leaf whose counter increased from ``old_tree`` to ``new_tree``."""
    changes: List[StatChange] = []

    def walk(old_node: Any, new_node: Any, path: List[str]) -> None:
        if not isinstance(old_node, Mapping) or not isinstance(new_node, Mapping):
            return

        if _is_stat_leaf(old_node, new_node):
            old_size = old_node["size"]
            new_size = new_node["size"]
            if new_size > old_size:
                changes.append(
                    StatChange(
                        category=str(path[1]) if len(path) >= 2 else UNKNOWN,
                        map_name=str(path[2]) if len(path) >= 3 else UNKNOWN,
                        result=str(old_node["name"]),
                        old_value=old_size,
                        new_value=new_size,
                    )
                )
            return

        old_kids = _children(old_node)
        new_kids = _children(new_node)
        if old_kids is None or new_kids is None:
            return

        child_path = path + [old_node.get("name")]
        for old_child, new_child in zip(old_kids, new_kids):
            walk(old_child, new_child, child_path)

    walk(old_tree, new_tree, [])
    return changes
