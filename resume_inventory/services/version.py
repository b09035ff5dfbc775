from __future__ import annotations
from typing import Any, Union
import logging
import re

from resume_inventory.models.schema import SchemaVersion, UnparsedVersion

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)", re.ASCII)


def parse_schema_version(value: Any) -> Union[SchemaVersion, UnparsedVersion]:
	if isinstance(value, str):
		m = _VERSION_RE.fullmatch(value)
		if m:
			return SchemaVersion(major=int(m.group(1)), minor=int(m.group(2)), patch=int(m.group(3)))
	return UnparsedVersion(raw=value)


def bump_patch_version(value: Any) -> Any:
	"""'1.4.0' -> '1.4.1'. Anything that is not a dotted triple comes back unchanged."""
	parsed = parse_schema_version(value)
	if isinstance(parsed, UnparsedVersion):
		logger.warning("version: schema_version=%r is not major.minor.patch; leaving unchanged", value)
		return value
	return str(parsed.bump_patch())
