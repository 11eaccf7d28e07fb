from __future__ import annotations

from typing import List

from .models import AssetsDirectoryTargeting, TargetingDimension


def get_targeting_dimensions(targeting: AssetsDirectoryTargeting) -> List[TargetingDimension]:
    """Returns the targeting dimensions present on an assets directory, in declaration order."""
    present = {
        TargetingDimension.ABI: targeting.abi is not None,
        TargetingDimension.GRAPHICS_API: targeting.graphics_api is not None,
        TargetingDimension.TEXTURE_COMPRESSION_FORMAT: targeting.texture_compression_format is not None,
        TargetingDimension.LANGUAGE: targeting.language is not None,
    }
    return [dim for dim in TargetingDimension if present[dim]]
