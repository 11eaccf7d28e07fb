import pytest

from variantkit.core.observability.metrics import snapshot_named
from variantkit.core.targeting import (
    InvariantViolation,
    ModuleSplit,
    PartialOverlapError,
    SdkRange,
    TargetingRunConfig,
    check_variant_match_with_module_split,
    match_module_splits_with_variants,
    variant_targeting_for_sdk,
)


def _split(name: str, min_sdk: int, *alternatives: int) -> ModuleSplit:
    return ModuleSplit(
        module_name="base",
        split_id=name,
        variant_targeting=variant_targeting_for_sdk(min_sdk, alternatives),
    )


def test_split_assigned_to_enclosing_variant_only():
    a = variant_targeting_for_sdk(1, [21])
    b = variant_targeting_for_sdk(21)
    split = _split("lollipop_minus", 1, 21)

    mapping = match_module_splits_with_variants([a, b], [split])

    assert mapping[a] == (split,)
    assert mapping[b] == ()


def test_partial_overlap_raises():
    variant = variant_targeting_for_sdk(1, [24])
    split = _split("overlapping", 21, 26)

    with pytest.raises(InvariantViolation) as exc:
        match_module_splits_with_variants([variant], [split])

    assert isinstance(exc.value, PartialOverlapError)
    assert exc.value.variant_range == SdkRange(min=1, max=24)
    assert exc.value.split_range == SdkRange(min=21, max=26)
    assert snapshot_named()["invariant_violations|partial_overlap"] == 1


def test_split_may_match_several_variants():
    wide = variant_targeting_for_sdk(1)
    narrow = variant_targeting_for_sdk(21)
    split = _split("mid", 21, 26)

    mapping = match_module_splits_with_variants([wide, narrow], [split])

    assert mapping[wide] == (split,)
    assert mapping[narrow] == (split,)


def test_order_of_variants_and_splits_is_preserved():
    variants = [variant_targeting_for_sdk(m, [1, 21, 26]) for m in (26, 1, 21)]
    splits = [_split(f"s{m}", m, 1, 21, 26) for m in (21, 26, 1)] + [_split("s21b", 21, 26)]

    mapping = match_module_splits_with_variants(variants, splits)

    assert list(mapping) == variants
    assert [s.split_id for s in mapping[variants[2]]] == ["s21", "s21b"]
    assert [s.split_id for s in mapping[variants[0]]] == ["s26"]


def test_empty_inputs():
    assert match_module_splits_with_variants([], [_split("a", 1)]) == {}
    v = variant_targeting_for_sdk(1)
    assert match_module_splits_with_variants([v], []) == {v: ()}


def test_inputs_are_not_mutated():
    variants = [variant_targeting_for_sdk(1, [21]), variant_targeting_for_sdk(21, [1])]
    splits = [_split("a", 1, 21), _split("b", 21)]
    before = (list(variants), list(splits))

    match_module_splits_with_variants(variants, splits)

    assert (variants, splits) == before


def test_parallel_matching_equals_sequential():
    bounds = [1, 16, 21, 24, 26, 28, 30]
    variants = [variant_targeting_for_sdk(m, bounds) for m in bounds]
    splits = [_split(f"s{m}", m, *bounds) for m in bounds]

    sequential = match_module_splits_with_variants(variants, splits)
    parallel = match_module_splits_with_variants(variants, splits, config=TargetingRunConfig(match_workers=4))

    assert parallel == sequential
    assert list(parallel) == list(sequential)
    assert all(len(v) == 1 for v in parallel.values())


def test_parallel_matching_propagates_violation():
    variants = [variant_targeting_for_sdk(1, [21]), variant_targeting_for_sdk(21, [24])]
    splits = [_split("bad", 22, 26)]

    with pytest.raises(PartialOverlapError):
        match_module_splits_with_variants(variants, splits, config=TargetingRunConfig(match_workers=2))


def test_single_pair_check():
    variant = variant_targeting_for_sdk(21, [26])
    assert check_variant_match_with_module_split(variant, _split("same", 21, 26))
    assert not check_variant_match_with_module_split(variant, _split("later", 26))


def test_match_counter_tracks_assignments():
    a = variant_targeting_for_sdk(1, [21])
    b = variant_targeting_for_sdk(21, [1])
    match_module_splits_with_variants([a, b], [_split("x", 1, 21), _split("y", 21, 1)])

    assert snapshot_named()["split_matches"] == 2
