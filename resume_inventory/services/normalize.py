from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Tuple
import re

from resume_inventory.models.schema import Dates

_WS_RE = re.compile(r"\s+")

OPEN_END = "present"


def normalize_space(s: Any) -> str:
	return _WS_RE.sub(" ", str(s or "")).strip()


def uniq_preserve(items: Iterable[Any]) -> List[Any]:
	seen = set()
	out: List[Any] = []
	for x in items:
		key = str(x)
		if key not in seen:
			seen.add(key)
			out.append(x)
	return out


def date_range_fragment(dates: Optional[Dates]) -> str:
	"""Render `dates <start>–<end>`; empty when neither bound is set."""
	if dates is None:
		return ""
	start = dates.start or ""
	if not (start or dates.end):
		return ""
	return f"dates {start}–{dates.end or OPEN_END}"


def collection_items(document: Dict[str, Any], key: str) -> Tuple[List[Any], bool]:
	"""Entries of ``experience``/``projects`` and whether the shape was usable.

	Accepts ``{"items": [...]}`` or a bare list; a missing collection is empty.
	"""
	raw = document.get(key)
	if raw is None:
		return [], True
	if isinstance(raw, dict):
		raw = raw.get("items")
		if raw is None:
			return [], True
	if isinstance(raw, list):
		return raw, True
	return [], False


def vocabulary_tags(document: Dict[str, Any]) -> set:
	vocab = document.get("controlled_vocabulary")
	if isinstance(vocab, dict):
		vocab = vocab.get("tags")
	if not isinstance(vocab, list):
		return set()
	# unhashable members can never match a tag
	return {t for t in vocab if isinstance(t, (str, int, float))}
