from __future__ import annotations

import logging
from typing import Any, TypeVar

from variantkit.core.observability.metrics import inc_violation

log = logging.getLogger("variantkit.targeting")

E = TypeVar("E", bound=BaseException)


class InvariantViolation(RuntimeError):
    """Targeting data is inconsistent; the current packaging operation cannot continue."""


class PartialOverlapError(InvariantViolation):
    def __init__(self, variant_range: Any, split_range: Any):
        self.variant_range = variant_range
        self.split_range = split_range
        super().__init__(
            f"Partial overlap between the sdk ranges of variant {variant_range} "
            f"and module split {split_range}."
        )


def reported(exc: E, *, reason: str) -> E:
    """Logs and counts a violation; returns it so the caller can `raise reported(...)`."""
    log.error("Targeting invariant violated (%s): %s", reason, exc)
    inc_violation(reason)
    return exc
