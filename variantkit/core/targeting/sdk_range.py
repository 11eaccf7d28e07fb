from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .models import SdkVersionTargeting

DEFAULT_MIN_SDK = 1
UNBOUNDED = math.inf

SdkBound = Union[int, float]


def get_min_sdk(targeting: SdkVersionTargeting) -> int:
    """Minimum sdk (inclusive) supported by the targeting."""
    if not targeting.value:
        return DEFAULT_MIN_SDK
    return targeting.value[0].min


def get_max_sdk(targeting: SdkVersionTargeting) -> SdkBound:
    """Maximum sdk (exclusive): the closest alternative above the minimum, else unbounded."""
    min_sdk = get_min_sdk(targeting)
    return min(
        (alt.min for alt in targeting.alternatives if alt.min > min_sdk),
        default=UNBOUNDED,
    )


@dataclass(frozen=True)
class SdkRange:
    min: int
    max: SdkBound

    def encloses(self, other: "SdkRange") -> bool:
        return self.min <= other.min and other.max <= self.max

    def is_disjoint(self, other: "SdkRange") -> bool:
        return self.max <= other.min or other.max <= self.min

    def __str__(self) -> str:
        upper = "inf" if self.max == UNBOUNDED else str(self.max)
        return f"[ {self.min}, {upper} )"


def sdk_range_of(targeting: SdkVersionTargeting) -> SdkRange:
    return SdkRange(min=get_min_sdk(targeting), max=get_max_sdk(targeting))
