from .config import TargetingRunConfig
from .dimensions import get_targeting_dimensions
from .errors import InvariantViolation, PartialOverlapError
from .matcher import check_variant_match_with_module_split, match_module_splits_with_variants
from .models import (
    AbiTargeting,
    AssetsDirectoryTargeting,
    GraphicsApiTargeting,
    LanguageTargeting,
    ModuleSplit,
    SdkVersion,
    SdkVersionTargeting,
    TargetingDimension,
    TextureCompressionFormatTargeting,
    VariantTargeting,
    sdk_version_from,
    sdk_version_targeting,
    variant_targeting_for_sdk,
)
from .partitioner import find_sdk_gaps, generate_all_sdk_targetings, generate_all_variant_targetings
from .sdk_range import DEFAULT_MIN_SDK, UNBOUNDED, SdkRange, get_max_sdk, get_min_sdk, sdk_range_of

__all__ = [
    "AbiTargeting",
    "AssetsDirectoryTargeting",
    "DEFAULT_MIN_SDK",
    "GraphicsApiTargeting",
    "InvariantViolation",
    "LanguageTargeting",
    "ModuleSplit",
    "PartialOverlapError",
    "SdkRange",
    "SdkVersion",
    "SdkVersionTargeting",
    "TargetingDimension",
    "TargetingRunConfig",
    "TextureCompressionFormatTargeting",
    "UNBOUNDED",
    "VariantTargeting",
    "check_variant_match_with_module_split",
    "find_sdk_gaps",
    "generate_all_sdk_targetings",
    "generate_all_variant_targetings",
    "get_max_sdk",
    "get_min_sdk",
    "get_targeting_dimensions",
    "match_module_splits_with_variants",
    "sdk_range_of",
    "sdk_version_from",
    "sdk_version_targeting",
    "variant_targeting_for_sdk",
]
