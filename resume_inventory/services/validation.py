from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Tuple
import logging

from rapidfuzz import fuzz, process, utils

from resume_inventory.services.normalize import collection_items, vocabulary_tags

logger = logging.getLogger(__name__)

COLLECTIONS = ("experience", "projects")
ROOT_PATH = "root"
SUGGESTION_CUTOFF = 80


def _walk_tags(node: Any, path: str) -> Iterable[Tuple[str, str]]:
    """Yield (tag, path) for every non-blank string under a ``tags`` list, depth first."""
    if isinstance(node, list):
        for i, child in enumerate(node):
            yield from _walk_tags(child, f"{path}[{i}]")
    elif isinstance(node, dict):
        for key, value in node.items():
            child_path = f"{path}.{key}"
            if key == "tags" and isinstance(value, list):
                for tag in value:
                    if isinstance(tag, str) and tag.strip():
                        yield tag, child_path
            else:
                yield from _walk_tags(value, child_path)


def find_invalid_tags(document: Dict[str, Any]) -> List[Tuple[str, str]]:
    """Tags outside the controlled vocabulary, with their paths. Empty vocabulary allows anything."""
    allowed = vocabulary_tags(document)
    if not allowed:
        return []
    return [(tag, path) for tag, path in _walk_tags(document, ROOT_PATH) if tag not in allowed]


def validate_inventory(document: Dict[str, Any]) -> List[str]:
    """Collect every structural, id and tag violation in discovery order.

    Nothing is raised for expected problems; an empty list means the
    document may be updated.
    """
    errors: List[str] = []

    collections = []
    for name in COLLECTIONS:
        items, ok = collection_items(document, name)
        if not ok:
            errors.append(f"{name}.items is not an array")
        collections.append((name, items))

    # One id namespace across both collections
    seen = set()
    for name, items in collections:
        for item in items:
            entry_id = item.get("id") if isinstance(item, dict) else None
            if not entry_id:
                errors.append(f"{name}: item missing id")
            elif not isinstance(entry_id, (str, int, float)):
                errors.append(f"{name}: item id is not a scalar")
            elif entry_id in seen:
                errors.append(f"duplicate id: {entry_id}")
            else:
                seen.add(entry_id)

    for tag, path in find_invalid_tags(document):
        errors.append(f"invalid tag '{tag}' at {path}")

    logger.info("validation: violations=%d", len(errors))
    return errors


def suggest_vocabulary_tag(tag: str, vocabulary: Iterable[Any]) -> Optional[str]:
    """Closest vocabulary member to ``tag``, or None when nothing is close enough."""
    choices = sorted(str(v) for v in vocabulary)
    if not choices:
        return None
    match = process.extractOne(
        tag,
        choices,
        scorer=fuzz.ratio,
        processor=utils.default_process,
        score_cutoff=SUGGESTION_CUTOFF,
    )
    return match[0] if match else None


def tag_suggestions(document: Dict[str, Any]) -> Dict[str, str]:
    """Map each distinct invalid tag to its closest allowed spelling, where one exists."""
    allowed = vocabulary_tags(document)
    hints: Dict[str, str] = {}
    for tag, _path in find_invalid_tags(document):
        if tag in hints:
            continue
        best = suggest_vocabulary_tag(tag, allowed)
        if best is not None:
            hints[tag] = best
    return hints
