"""Snapshot output."""

from __future__ import annotations

import logging
from pathlib import Path

from ebaylistings.models import Snapshot

logger = logging.getLogger(__name__)


def write_snapshot(snapshot: Snapshot, output_path: str) -> Path:
    """Write *snapshot* as indented JSON to *output_path*, replacing any previous file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(snapshot.to_json(), encoding="utf-8")
    logger.debug("Wrote snapshot for %s to %s", snapshot.seller, path)
    return path
