from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import json
import logging
import os
import shutil
import tempfile

logger = logging.getLogger(__name__)


def _current_umask() -> int:
	# os.umask can only be read by setting it
	mask = os.umask(0)
	os.umask(mask)
	return mask


class InventoryLoadError(Exception):
	"""The source inventory could not be read or is not a JSON object."""


def load_inventory(path: Path) -> Dict[str, Any]:
	try:
		raw = Path(path).read_text(encoding="utf-8")
	except OSError as e:
		raise InventoryLoadError(f"cannot read {path}: {e}") from e
	try:
		data = json.loads(raw)
	except json.JSONDecodeError as e:
		raise InventoryLoadError(f"invalid JSON in {path}: {e}") from e
	if not isinstance(data, dict):
		raise InventoryLoadError(f"{path}: top-level JSON value must be an object")
	logger.info("storage: loaded=%s chars=%d", path, len(raw))
	return data


def dump_inventory(document: Dict[str, Any]) -> str:
	return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def save_inventory(document: Dict[str, Any], path: Path) -> Path:
	"""Write the whole document atomically; the destination is replaced only on success."""
	# write through symlinks to their target
	path = Path(path).resolve()
	text = dump_inventory(document)
	path.parent.mkdir(parents=True, exist_ok=True)
	fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
	try:
		with os.fdopen(fd, "w", encoding="utf-8") as f:
			f.write(text)
		if path.exists():
			shutil.copymode(path, tmp_name)
		else:
			os.chmod(tmp_name, 0o666 & ~_current_umask())
		os.replace(tmp_name, path)
	except BaseException:
		if os.path.exists(tmp_name):
			os.unlink(tmp_name)
		raise
	logger.info("storage: wrote=%s bytes=%d", path, len(text.encode("utf-8")))
	return path
