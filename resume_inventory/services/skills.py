from __future__ import annotations
from typing import List, Optional, Sequence
from pathlib import Path
import json
import logging

import resume_inventory.config as cfg
from resume_inventory.services.normalize import uniq_preserve

logger = logging.getLogger(__name__)

# Keep the token list conservative; it's for retrieval, not truth.
TECH_TOKENS = [
    "node", "node.js", "typescript", "javascript", "python", "react", "next.js",
    "aws", "lambda", "api gateway", "s3", "cloudfront",
    "gcp", "cloud run", "vertex ai",
    "docker", "kubernetes",
    "postgres", "postgresql", "redis", "kafka", "rabbitmq",
    "grafana", "prometheus", "opentelemetry", "otel",
    "rest", "graphql", "websockets", "microservices",
    "ci/cd", "cicd", "devops", "nginx",
    "solidity", "ethereum", "smart contracts",
    "hyperledger", "fabric",
    "c#", ".net", "asp.net", "oracle", "db2",
    "omnet++", "mpls", "c++",
    "n8n", "langchain",
]


def extract_tech_tokens(text: str, tokens: Optional[Sequence[str]] = None) -> List[str]:
    """Return the known technology tokens contained in ``text``, in list order.

    Plain substring containment on the lower-cased text, so "rest" also fires
    inside "restaurant". Good enough for lexical retrieval.
    """
    low = str(text or "").lower()
    found = [tok for tok in (TECH_TOKENS if tokens is None else tokens) if tok in low]
    return uniq_preserve(found)


def load_tech_tokens(path: Optional[Path] = None) -> List[str]:
    """Built-in tokens extended with a user-supplied JSON list of extras."""
    path = path or cfg.TECH_TOKENS_PATH
    tokens = list(TECH_TOKENS)
    if not path.exists():
        return tokens
    try:
        extra = json.loads(path.read_text(encoding="utf-8") or "[]")
    except (OSError, ValueError):
        logger.warning("tech_tokens: could not read %s; using built-in list", path)
        return tokens
    if not isinstance(extra, list):
        logger.warning("tech_tokens: %s is not a JSON list; using built-in list", path)
        return tokens
    cleaned = [str(t).strip().lower() for t in extra if isinstance(t, str) and t.strip()]
    merged = uniq_preserve(tokens + cleaned)
    logger.info("tech_tokens: loaded extra=%d from %s", len(merged) - len(tokens), path)
    return merged
