from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence
import logging

from resume_inventory.services.normalize import collection_items
from resume_inventory.services.search_blob import build_search_blob_experience, build_search_blob_project
from resume_inventory.services.version import bump_patch_version

logger = logging.getLogger(__name__)


def format_timestamp(now: Optional[datetime] = None) -> str:
	"""UTC ISO-8601 with millisecond precision and a trailing Z."""
	now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
	return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def _manifest_record(entry: Dict[str, Any], name_key: str) -> Dict[str, Any]:
	record: Dict[str, Any] = {}
	# keys missing on the entry stay missing in the manifest
	for key in ("id", name_key):
		if key in entry:
			record[key] = entry[key]
	record["dates"] = entry.get("dates") or {}
	record["search_blob"] = entry["search_blob"]
	return record


def _entries(document: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
	items, _ok = collection_items(document, key)
	return [e for e in items if isinstance(e, dict)]


def update_manifest(
	document: Dict[str, Any],
	now: Optional[datetime] = None,
	tokens: Optional[Sequence[str]] = None,
	max_bullets: int = 3,
) -> Dict[str, Any]:
	"""Recompute search blobs, the manifest, timestamp and schema_version in place.

	Expects a document that already passed validation. Returns the same object.
	"""
	exps = _entries(document, "experience")
	projs = _entries(document, "projects")

	for e in exps:
		build_search_blob_experience(e, tokens=tokens, max_bullets=max_bullets)
	for p in projs:
		build_search_blob_project(p, tokens=tokens, max_bullets=max_bullets)

	document["manifest"] = {
		"experiences": [_manifest_record(e, "org") for e in exps],
		"projects": [_manifest_record(p, "name") for p in projs],
	}
	document["manifest_generated_at"] = format_timestamp(now)
	if "schema_version" in document:
		document["schema_version"] = bump_patch_version(document["schema_version"])

	logger.info(
		"manifest: experiences=%d projects=%d schema_version=%s",
		len(exps), len(projs), document.get("schema_version"),
	)
	return document
