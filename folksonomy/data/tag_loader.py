import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

import pandas as pd

from folksonomy.models import TagCount
from folksonomy.utils.logger import get_logger

logger = get_logger()


def tag_counts_from_records(records: Iterable[Dict[str, Any]]) -> List[TagCount]:
    """
    Count tag usage across tagged records (e.g. blog posts).

    Args:
        records: Dicts with a ``tags`` list each.

    Returns:
        List[TagCount]: One entry per distinct tag, in order of first appearance.
    """
    rows = []
    for record in records:
        tags = record.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]
        for tag in tags:
            tag = str(tag).strip()
            if tag:
                rows.append({"tag": tag})

    df = pd.DataFrame(rows, columns=["tag"])
    if df.empty:
        logger.warning("[TagLoader] No tags found in records")
        return []

    counts = df.groupby("tag", sort=False).size()
    return [TagCount(tag=str(tag), count=int(count)) for tag, count in counts.items()]


def tag_counts_from_frame(df: pd.DataFrame) -> List[TagCount]:
    """
    Convert a ``tag``/``count`` frame into TagCounts, summing repeated tags.
    """
    missing = {"tag", "count"} - set(df.columns)
    if missing:
        raise ValueError(f"[TagLoader] Missing columns: {sorted(missing)}")

    if df.empty:
        return []

    tags = df["tag"]
    if tags.isna().any() or (tags.astype(str).str.strip() == "").any():
        raise ValueError("[TagLoader] Every row needs a non-empty tag")

    counts = pd.to_numeric(df["count"], errors="coerce")
    if counts.isna().any():
        raise ValueError("[TagLoader] Every tag needs a numeric count")
    if (counts % 1 != 0).any():
        raise ValueError("[TagLoader] Tag counts must be whole numbers")
    if (counts < 0).any():
        raise ValueError("[TagLoader] Tag counts must not be negative")

    frame = pd.DataFrame({"tag": tags.astype(str).str.strip(), "count": counts.astype(int)})

    totals = frame.groupby("tag", sort=False)["count"].sum()
    return [TagCount(tag=str(tag), count=int(count)) for tag, count in totals.items()]


def load_tag_counts(path: Path) -> List[TagCount]:
    """
    Read tag counts from a CSV (``tag,count``) or JSON file.

    JSON may hold either ``[{"tag": ..., "count": ...}]`` or tagged records
    ``[{"tags": [...]}, ...]``, which are counted.
    """
    suffix = path.suffix.lower()

    try:
        if suffix == ".csv":
            # Tags such as "NA" or "null" are real tags, not missing values
            frame = pd.read_csv(path, keep_default_na=False, dtype={"tag": str})
            tag_data = tag_counts_from_frame(frame)
        elif suffix == ".json":
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError("[TagLoader] JSON root must be a list")
            bad_items = [item for item in data if not isinstance(item, dict)]
            if bad_items:
                raise ValueError(f"[TagLoader] JSON items must be objects, got {bad_items[0]!r}")
            if any("tags" in item for item in data):
                tag_data = tag_counts_from_records(data)
            else:
                tag_data = tag_counts_from_frame(pd.DataFrame(data, columns=["tag", "count"]))
        else:
            raise ValueError(f"[TagLoader] Unsupported file type: {path.suffix}")

    except Exception as ex:
        logger.error(f"[TagLoader] Failed to load tag counts from {path}: {ex}")
        raise

    logger.info(f"[TagLoader] Loaded {len(tag_data)} tags from {path}")
    return tag_data
