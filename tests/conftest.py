import copy
import json

import pytest
from typer.testing import CliRunner


SAMPLE_INVENTORY = {
    "schema_version": "1.4.0",
    "controlled_vocabulary": {"tags": ["aws", "backend", "leadership", "python"]},
    "experience": {
        "items": [
            {
                "id": "exp-acme",
                "org": "Acme",
                "org_descriptor": "Logistics SaaS",
                "role": {"title": "Senior Engineer"},
                "dates": {"start": "2020-01"},
                "stack_scope": [{"text": "Python services on AWS Lambda"}],
                "bullets": [
                    {
                        "text_short": "Mentored four engineers",
                        "claim_type": "other",
                        "confidence": "high",
                        "tags": ["leadership"],
                    },
                    {
                        "text_short": "Cut p95 latency by 40%",
                        "text_long": "Cut p95 latency by 40% across the order API",
                        "claim_type": "metric",
                        "confidence": "medium",
                        "tags": ["backend", "aws"],
                    },
                ],
            }
        ]
    },
    "projects": {
        "items": [
            {
                "id": "proj-cli",
                "name": "Inventory CLI",
                "descriptor": "Open source",
                "description": "Command line tooling",
                "dates": {"start": "2022", "end": "2023"},
                "bullets": [
                    {"text_long": "Shipped a python package", "tags": ["python"]},
                ],
            }
        ]
    },
    "notes": "kept as-is",
}


@pytest.fixture(autouse=True)
def _no_user_tech_tokens(tmp_path, monkeypatch):
    # keep a developer's own tech_tokens.json out of the results
    monkeypatch.setattr("resume_inventory.config.TECH_TOKENS_PATH", tmp_path / "no-tech-tokens.json")


@pytest.fixture
def inventory():
    """Fresh deep copy of a small valid inventory."""
    return copy.deepcopy(SAMPLE_INVENTORY)


@pytest.fixture
def inventory_file(tmp_path, inventory):
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps(inventory, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def cli_runner():
    return CliRunner()
