from __future__ import annotations

import logging
from itertools import islice
from typing import Any, Iterable, List, Optional

from .fallback import load_with_fallback
from .paths import BaseDirStrategy, resolve_base_dir, user_file
from .records import Score, format_scores, parse_scores
from .resources import BundledResources

logger = logging.getLogger(__name__)

# Max number of high scores kept on disk
MAX_SCORES = 7
SCORES_FILE = "scores"


def load_default_high_scores(resources: Optional[BundledResources] = None) -> List[Score]:
    res = resources or BundledResources()
    with res.open_text(SCORES_FILE) as fh:
        scores = parse_scores(fh, source=f"bundled {SCORES_FILE}")
    return sorted(scores)


def load_high_scores(
    get_base_dir: BaseDirStrategy = resolve_base_dir,
    resources: Optional[BundledResources] = None,
) -> List[Score]:
    """Load the user's high scores, highest first.

    Falls back to the bundled defaults when the user has no scores file.
    """
    res = resources or BundledResources()
    path = user_file(SCORES_FILE, get_base_dir)
    scores = load_with_fallback(
        lambda: open(path, "r", encoding="utf-8"),
        lambda: res.open_text(SCORES_FILE),
        lambda fh: parse_scores(fh, source=str(path)),
        "high scores",
    )
    return sorted(scores)


def save_high_scores(scores: Iterable[Any], get_base_dir: BaseDirStrategy = resolve_base_dir) -> int:
    """Overwrite the user's scores file with at most MAX_SCORES entries.

    Entries are written in the order given; callers sort beforehand. Returns
    the number of records written.
    """
    kept = list(islice(scores, MAX_SCORES))
    text = format_scores(kept)
    path = user_file(SCORES_FILE, get_base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Saving user high scores.")
    with open(path, "w", encoding="utf-8", newline="\n") as fh:
        fh.write(text)
    return len(kept)
