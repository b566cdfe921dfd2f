"""Catalog export."""

import logging
from collections.abc import Iterable
from typing import Any

from sildish.catalog.phonemes import CAPITAL_MARK, CLUSTERS, PHONEMES
from sildish.models import PhonemeData, code_points
from sildish.utils.hashing import hash_json


CATALOG_VERSION = 1


def build_catalog(
    logger: logging.Logger,
    phonemes: Iterable[PhonemeData] = PHONEMES,
    clusters: Iterable[PhonemeData] = CLUSTERS,
) -> dict[str, Any]:
    """
    Build the JSON-serializable phoneme catalog.

    Glyphs are written as U+XXXX labels so the file stays readable without
    the Sildish font. The content hash covers everything except itself.

    Args:
        logger: Logger instance
        phonemes: Catalog phonemes
        clusters: Catalog clusters

    Returns:
        Catalog data dictionary
    """
    catalog: dict[str, Any] = {
        "version": CATALOG_VERSION,
        "capital_mark": code_points(CAPITAL_MARK),
        "phonemes": [p.to_dict() for p in phonemes],
        "clusters": [c.to_dict() for c in clusters],
    }
    catalog["content_hash"] = hash_json(catalog)

    logger.info(
        f"Built catalog with {len(catalog['phonemes'])} phonemes "
        f"and {len(catalog['clusters'])} clusters"
    )
    return catalog


def catalog_hash_matches(catalog: dict[str, Any]) -> bool:
    """True if the stored content hash matches the catalog body."""
    body = {key: value for key, value in catalog.items() if key != "content_hash"}
    return catalog.get("content_hash") == hash_json(body)
