# -*- coding: utf-8 -*-
"""Turn delimited model output into typed meal records."""

from __future__ import annotations

import csv
import logging
from typing import List

from ..errors import ParseError
from .models import MealRecord
from .repair import repair_delimiters

logger = logging.getLogger(__name__)


def _read_line(line: str, delimiter: str) -> List[str]:
    """Split one line; an unbalanced quote is read as a literal character."""
    quoting = csv.QUOTE_NONE if line.count('"') % 2 else csv.QUOTE_MINIMAL
    try:
        return next(csv.reader([line], delimiter=delimiter, quoting=quoting), [])
    except csv.Error as exc:
        raise ParseError(f"error reading CSV: {exc}") from exc


def _read_rows(text: str, expected_fields: int, delimiter: str) -> List[List[str]]:
    rows: List[List[str]] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        # Models sometimes wrap the rows in a Markdown fence despite instructions.
        if line.startswith("```"):
            continue
        row = _read_line(line, delimiter)
        if len(row) != expected_fields:
            line = repair_delimiters(line, expected_fields - 1, delimiter)
            row = _read_line(line, delimiter)
        rows.append(row)
    return rows


def parse_meal_records(
    text: str,
    expected_fields: int = MealRecord.FIELD_COUNT,
    delimiter: str = ";",
) -> List[MealRecord]:
    """Parse one meal record per non-empty line of ``text``.

    Raises:
        ParseError: the text has no rows, is not valid delimited text, or a
            row still has fewer than five fields after repair.
    """
    if expected_fields < 1:
        raise ValueError("expected_fields must be >= 1")

    rows = _read_rows(text, expected_fields, delimiter)
    if not rows:
        raise ParseError("no records found in response")

    meals: List[MealRecord] = []
    for lineno, row in enumerate(rows, start=1):
        if len(row) < MealRecord.FIELD_COUNT:
            raise ParseError(
                f"record on line {lineno} has {len(row)} fields, "
                f"expected {MealRecord.FIELD_COUNT}"
            )
        meals.append(MealRecord.from_row([field.strip() for field in row]))

    logger.debug("parsed %d meal records", len(meals))
    return meals


def parse_single_meal(
    text: str,
    expected_fields: int = MealRecord.FIELD_COUNT,
    delimiter: str = ";",
) -> MealRecord:
    """Parse a swap reply; only the first record is used."""
    return parse_meal_records(text, expected_fields, delimiter)[0]
