from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, Union

from resume_inventory.models.schema import ExperienceItem, ProjectItem
from resume_inventory.services.bullets import collect_tags_from_bullets, pick_best_bullets
from resume_inventory.services.normalize import date_range_fragment, normalize_space
from resume_inventory.services.skills import extract_tech_tokens

DELIMITER = " | "


def _assemble(
    head: List[Optional[str]],
    entry: Union[ExperienceItem, ProjectItem],
    tokens: Optional[Sequence[str]],
    max_bullets: int,
) -> str:
    parts: List[Optional[str]] = list(head)
    parts.append(date_range_fragment(entry.dates))
    if entry.stack_scope is not None:
        parts.extend(ss.text for ss in entry.stack_scope)
    parts.extend(b.display_text() for b in pick_best_bullets(entry, max_bullets))

    tags = collect_tags_from_bullets(entry.bullets)
    if tags:
        parts.append("tags " + " ".join(sorted(tags)))

    blob = normalize_space(DELIMITER.join(p for p in parts if p))
    tech = extract_tech_tokens(blob, tokens)
    if tech:
        blob = f"{blob}{DELIMITER}tech {' '.join(tech)}"
    return blob


def build_search_blob_experience(
    exp: Dict[str, Any],
    tokens: Optional[Sequence[str]] = None,
    max_bullets: int = 3,
) -> str:
    """Synthesize the search blob for one experience entry and store it on the entry."""
    item = ExperienceItem.model_validate(exp)
    head = [item.org, item.org_descriptor, item.role.title if item.role else None]
    blob = _assemble(head, item, tokens, max_bullets)
    exp["search_blob"] = blob
    return blob


def build_search_blob_project(
    project: Dict[str, Any],
    tokens: Optional[Sequence[str]] = None,
    max_bullets: int = 3,
) -> str:
    """Same as the experience variant, with the project description after the role."""
    item = ProjectItem.model_validate(project)
    head = [item.name, item.descriptor, item.role.title if item.role else None, item.description]
    blob = _assemble(head, item, tokens, max_bullets)
    project["search_blob"] = blob
    return blob
