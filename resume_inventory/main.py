"""Regenerate the manifest and per-entry search blobs of a resume inventory.

Usage:
    resume-inventory --in inventory.json --out inventory.json
    resume-inventory --in inventory.json --out inventory.v1.json
    resume-inventory --in inventory.json --out inventory.json --dry
"""

import json
import logging
from pathlib import Path

import typer

import resume_inventory.config as cfg
from resume_inventory.services.manifest import update_manifest
from resume_inventory.services.skills import load_tech_tokens
from resume_inventory.services.storage import InventoryLoadError, load_inventory, save_inventory
from resume_inventory.services.validation import tag_suggestions, validate_inventory

# Configure logging
logging.basicConfig(
	level=cfg.LOG_LEVEL,
	format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(
	name="resume-inventory",
	help="Validate a resume inventory and regenerate its manifest and search blobs.",
	add_completion=False,
)


@app.command()
def update(
	input_path: Path = typer.Option(
		...,
		"--in",
		help="Inventory JSON to read",
	),
	output_path: Path = typer.Option(
		...,
		"--out",
		help="Where to write the updated inventory (may equal --in)",
	),
	dry: bool = typer.Option(
		False,
		"--dry",
		"--preview",
		help="Print the computed manifest without writing anything",
	),
):
	"""Validate, rebuild manifest + search_blob fields, bump schema_version, write."""
	in_path = input_path.resolve()
	out_path = output_path.resolve()
	logger.info("update: start in=%s out=%s dry=%s version=%s", in_path, out_path, dry, cfg.APP_VERSION)

	try:
		inv = load_inventory(in_path)
	except InventoryLoadError as e:
		typer.echo(f"Error: {e}", err=True)
		raise typer.Exit(1)

	errors = validate_inventory(inv)
	if errors:
		typer.echo("VALIDATION ERRORS:", err=True)
		for msg in errors:
			typer.echo(f" - {msg}", err=True)
		for tag, best in tag_suggestions(inv).items():
			typer.echo(f"   hint: '{tag}' -> '{best}'", err=True)
		raise typer.Exit(1)

	updated = update_manifest(inv, tokens=load_tech_tokens(), max_bullets=cfg.MAX_BULLETS)

	if dry:
		typer.echo(json.dumps(updated["manifest"], indent=2, ensure_ascii=False))
		return

	save_inventory(updated, out_path)
	typer.echo(f"Updated manifest + search_blob. Wrote: {out_path}")
	typer.echo(f"New schema_version: {updated.get('schema_version')}")


def main():
	"""Entry point for the CLI."""
	app()


if __name__ == "__main__":
	main()
