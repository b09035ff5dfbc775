from __future__ import annotations
from typing import Iterable, List, Union

from resume_inventory.models.schema import Bullet, ExperienceItem, ProjectItem
from resume_inventory.services.normalize import uniq_preserve

METRIC_WEIGHT = 10
CONFIDENCE_WEIGHTS = {"high": 3, "medium": 2, "low": 1}
DEFAULT_CONFIDENCE_WEIGHT = 1


def score_bullet(bullet: Bullet) -> int:
    """Metric claims always outrank non-metric ones; confidence only breaks ties."""
    metric = METRIC_WEIGHT if bullet.claim_type == "metric" else 0
    return metric + CONFIDENCE_WEIGHTS.get(bullet.confidence or "", DEFAULT_CONFIDENCE_WEIGHT)


def pick_best_bullets(entry: Union[ExperienceItem, ProjectItem], max_n: int = 3) -> List[Bullet]:
    # sorted() is stable, so equal scores keep document order
    ranked = sorted(entry.bullets, key=score_bullet, reverse=True)
    return ranked[:max_n]


def collect_tags_from_bullets(bullets: Iterable[Bullet]) -> List[str]:
    """Return every non-empty tag across the bullets, first occurrence wins.

    Sorting is left to the caller.
    """
    tags: List[str] = []
    for b in bullets or []:
        tags.extend(str(t) for t in b.tags if t)
    return uniq_preserve(tags)
