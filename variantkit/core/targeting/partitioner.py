from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional

from variantkit.core.observability.metrics import inc_named

from .config import TargetingRunConfig, resolve_config
from .errors import InvariantViolation, reported
from .models import (
    SdkVersionTargeting,
    VariantTargeting,
    sdk_version_from,
    sdk_version_targeting,
)
from .sdk_range import SdkRange, sdk_range_of

log = logging.getLogger("variantkit.targeting.partitioner")


def find_sdk_gaps(variants: Iterable[VariantTargeting]) -> List[SdkRange]:
    """Sdk ranges between the lowest minimum and the highest maximum that no variant covers."""
    ranges = sorted(
        (sdk_range_of(v.sdk_version_targeting) for v in variants),
        key=lambda r: (r.min, r.max),
    )
    if not ranges:
        return []

    gaps: List[SdkRange] = []
    covered = ranges[0].max
    for r in ranges[1:]:
        if r.min > covered:
            gaps.append(SdkRange(min=int(covered), max=r.min))
        covered = max(covered, r.max)
    return gaps


def generate_all_sdk_targetings(sdk_targetings: Iterable[SdkVersionTargeting]) -> List[SdkVersionTargeting]:
    """
    Given potentially overlapping sdk targetings, generate disjoint sdk targetings
    covering all of them, ordered by minimum sdk.

    Each output has one distinct minimum as its value and every other distinct
    minimum as an alternative, so its range runs up to the next boundary.
    Assumes there are no sdk range gaps in the input.
    """
    targetings = list(sdk_targetings)
    for t in targetings:
        if len(t.value) != 1:
            raise reported(
                InvariantViolation(
                    f"Variant sdk targeting must have exactly one value, got {len(t.value)}."
                ),
                reason="missing_primary",
            )

    min_sdk_values = sorted({t.value[0].min for t in targetings})
    sdk_versions = [sdk_version_from(v) for v in min_sdk_values]

    return [
        sdk_version_targeting(version, [other for other in sdk_versions if other != version])
        for version in sdk_versions
    ]


def generate_all_variant_targetings(
    variants: Iterable[VariantTargeting],
    *,
    config: Optional[TargetingRunConfig] = None,
) -> FrozenSet[VariantTargeting]:
    """
    Given a set of potentially overlapping variant targetings, generate the
    smallest set of disjoint variant targetings covering all of them.

    Only sdk version targeting is considered. With `strict_gaps` enabled an
    input whose ranges leave a hole raises InvariantViolation; otherwise the
    caller is trusted to provide gap-free coverage.
    """
    cfg = resolve_config(config)
    variant_set = frozenset(variants)
    inc_named("partitions")

    if len(variant_set) <= 1:
        return variant_set

    if cfg.strict_gaps:
        gaps = find_sdk_gaps(variant_set)
        if gaps:
            raise reported(
                InvariantViolation(
                    "Sdk range gaps in variant targetings: " + ", ".join(str(g) for g in gaps)
                ),
                reason="sdk_gap",
            )

    sdk_targetings = generate_all_sdk_targetings(v.sdk_version_targeting for v in variant_set)
    log.debug("Partitioned %d variants into %d disjoint sdk ranges", len(variant_set), len(sdk_targetings))

    return frozenset(VariantTargeting(sdk_version_targeting=t) for t in sdk_targetings)
