# -*- coding: utf-8 -*-
"""Best-effort repair of delimiter counts in model output lines."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def repair_delimiters(line: str, expected: int, delimiter: str = ";") -> str:
    """Return ``line`` rewritten to contain exactly ``expected`` delimiters.

    Missing delimiters are inserted inside the first empty field boundary
    (two adjacent delimiters) or appended to the end of the line. Surplus
    delimiters are removed from the first adjacent pair, otherwise the last
    delimiter in the line is dropped. The result is not guaranteed to be
    semantically right; it only gives the CSV reader a chance.
    """
    if expected < 0:
        raise ValueError("expected delimiter count must be >= 0")
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")

    count = line.count(delimiter)
    if count == expected:
        return line

    logger.debug("repairing delimiter count %d -> %d: %r", count, expected, line)
    pair = delimiter * 2

    while count < expected:
        index = line.find(pair)
        if index != -1:
            line = line[: index + 1] + delimiter + line[index + 1 :]
        else:
            line += delimiter
        count += 1

    while count > expected:
        index = line.find(pair)
        if index == -1:
            index = line.rfind(delimiter)
        line = line[:index] + line[index + 1 :]
        count -= 1

    return line
