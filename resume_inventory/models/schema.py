from __future__ import annotations
from typing import Annotated, Any, List, Optional
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _as_text(value: Any) -> Optional[str]:
	# Numbers render as text; objects, lists and booleans count as absent
	if isinstance(value, str):
		return value
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	if isinstance(value, (int, float)) and not isinstance(value, bool):
		return str(value)
	return None


def _as_list(value: Any) -> list:
	return value if isinstance(value, list) else []


def _as_records(value: Any) -> List[dict]:
	# Non-object items keep their position but carry no fields
	return [v if isinstance(v, dict) else {} for v in _as_list(value)]


def _as_optional_records(value: Any) -> Optional[List[dict]]:
	return _as_records(value) if isinstance(value, list) else None


def _as_record(value: Any) -> Optional[dict]:
	return value if isinstance(value, dict) else None


Text = Annotated[Optional[str], BeforeValidator(_as_text)]


class _Lenient(BaseModel):
	model_config = ConfigDict(extra="allow")


class Bullet(_Lenient):
	claim_type: Text = None
	confidence: Text = None
	text_short: Text = None
	text_long: Text = None
	tags: Annotated[List[Any], BeforeValidator(_as_list)] = Field(default_factory=list)

	def display_text(self) -> str:
		return self.text_short or self.text_long or ""


class StackScope(_Lenient):
	text: Text = None


class Role(_Lenient):
	title: Text = None


class Dates(_Lenient):
	start: Text = None
	end: Text = None


class _Entry(_Lenient):
	role: Annotated[Optional[Role], BeforeValidator(_as_record)] = None
	dates: Annotated[Optional[Dates], BeforeValidator(_as_record)] = None
	stack_scope: Annotated[Optional[List[StackScope]], BeforeValidator(_as_optional_records)] = None
	bullets: Annotated[List[Bullet], BeforeValidator(_as_records)] = Field(default_factory=list)


class ExperienceItem(_Entry):
	org: Text = None
	org_descriptor: Text = None


class ProjectItem(_Entry):
	name: Text = None
	descriptor: Text = None
	description: Text = None


class SchemaVersion(BaseModel):
	"""A `major.minor.patch` schema version that parsed cleanly."""
	major: int
	minor: int
	patch: int

	def bump_patch(self) -> "SchemaVersion":
		return SchemaVersion(major=self.major, minor=self.minor, patch=self.patch + 1)

	def __str__(self) -> str:
		return f"{self.major}.{self.minor}.{self.patch}"


class UnparsedVersion(BaseModel):
	"""Any schema_version value that is not a dotted triple; passed through untouched."""
	raw: Any = None
