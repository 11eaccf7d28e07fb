from __future__ import annotations

import concurrent.futures
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from variantkit.core.observability.metrics import inc_named

from .config import TargetingRunConfig, resolve_config
from .errors import PartialOverlapError, reported
from .models import ModuleSplit, VariantTargeting
from .sdk_range import sdk_range_of

log = logging.getLogger("variantkit.targeting.matcher")

SplitAssignment = Dict[VariantTargeting, Tuple[ModuleSplit, ...]]


def check_variant_match_with_module_split(variant: VariantTargeting, module_split: ModuleSplit) -> bool:
    """
    True when the variant's sdk range fully encloses the module split's range.

    Ranges that do not enclose must be disjoint; a partial overlap means the
    targeting graph is inconsistent and raises PartialOverlapError.
    """
    variant_range = sdk_range_of(variant.sdk_version_targeting)
    split_range = sdk_range_of(module_split.variant_targeting.sdk_version_targeting)

    if variant_range.encloses(split_range):
        return True

    if not variant_range.is_disjoint(split_range):
        raise reported(PartialOverlapError(variant_range, split_range), reason="partial_overlap")
    return False


def _match_row(variant: VariantTargeting, module_splits: Tuple[ModuleSplit, ...]) -> Tuple[ModuleSplit, ...]:
    return tuple(s for s in module_splits if check_variant_match_with_module_split(variant, s))


def match_module_splits_with_variants(
    variants: Iterable[VariantTargeting],
    module_splits: Iterable[ModuleSplit],
    *,
    config: Optional[TargetingRunConfig] = None,
) -> SplitAssignment:
    """Maps each variant (input order) to the module splits it supports (input order)."""
    cfg = resolve_config(config)
    variant_list: List[VariantTargeting] = list(dict.fromkeys(variants))
    splits = tuple(module_splits)

    log.debug(
        "Matching %d module splits against %d variants (workers=%d)",
        len(splits),
        len(variant_list),
        cfg.match_workers,
    )

    if cfg.match_workers > 1 and len(variant_list) > 1:
        with concurrent.futures.ThreadPoolExecutor(max_workers=cfg.match_workers) as pool:
            rows = list(pool.map(lambda v: _match_row(v, splits), variant_list))
    else:
        rows = [_match_row(v, splits) for v in variant_list]

    mapping: SplitAssignment = dict(zip(variant_list, rows))
    inc_named("split_matches", sum(len(r) for r in rows))
    return mapping
