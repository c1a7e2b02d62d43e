from __future__ import annotations

import logging
from typing import IO, Optional

from .errors import RecordFormatError
from .fallback import load_with_fallback
from .paths import BaseDirStrategy, resolve_base_dir, user_file
from .records import format_int, parse_int, read_lines
from .resources import BundledResources

logger = logging.getLogger(__name__)

CURRENCY_FILE = "currency"


def parse_currency(stream: IO[str], source: Optional[str] = None) -> int:
    amount = parse_int(next(read_lines(stream), None), field="currency", source=source, line=1)
    if amount < 0:
        raise RecordFormatError(f"Negative currency {amount}", source, 1)
    return amount


def load_default_currency(resources: Optional[BundledResources] = None) -> int:
    res = resources or BundledResources()
    with res.open_text(CURRENCY_FILE) as fh:
        return parse_currency(fh, source=f"bundled {CURRENCY_FILE}")


def load_currency(
    get_base_dir: BaseDirStrategy = resolve_base_dir,
    resources: Optional[BundledResources] = None,
) -> int:
    res = resources or BundledResources()
    path = user_file(CURRENCY_FILE, get_base_dir)
    return load_with_fallback(
        lambda: open(path, "r", encoding="utf-8"),
        lambda: res.open_text(CURRENCY_FILE),
        lambda fh: parse_currency(fh, source=str(path)),
        "currency",
    )


def save_currency(amount: int, get_base_dir: BaseDirStrategy = resolve_base_dir) -> None:
    text = format_int(amount, field="currency")
    if amount < 0:
        raise ValueError(f"Currency cannot be negative: {amount}")
    path = user_file(CURRENCY_FILE, get_base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Saving user's currency.")
    with open(path, "w", encoding="utf-8", newline="\n") as fh:
        fh.write(text + "\n")
