from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import InvariantViolation, reported


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class SdkVersion(_Frozen):
    min: int = Field(ge=0)


class SdkVersionTargeting(_Frozen):
    # At most one primary value; alternatives are lower bounds of sibling ranges.
    value: Tuple[SdkVersion, ...] = ()
    alternatives: Tuple[SdkVersion, ...] = ()

    @model_validator(mode="after")
    def _single_primary(self) -> "SdkVersionTargeting":
        if len(self.value) > 1:
            raise reported(
                InvariantViolation(
                    f"Sdk version targeting must have at most one value, got {len(self.value)}."
                ),
                reason="multiple_primaries",
            )
        return self


class VariantTargeting(_Frozen):
    sdk_version_targeting: SdkVersionTargeting = Field(default_factory=SdkVersionTargeting)


class ModuleSplit(_Frozen):
    module_name: str
    variant_targeting: VariantTargeting = Field(default_factory=VariantTargeting)
    split_id: str = ""
    entries: Tuple[str, ...] = ()


class AbiTargeting(_Frozen):
    value: Tuple[str, ...] = ()
    alternatives: Tuple[str, ...] = ()


class GraphicsApiTargeting(_Frozen):
    value: Tuple[str, ...] = ()
    alternatives: Tuple[str, ...] = ()


class TextureCompressionFormatTargeting(_Frozen):
    value: Tuple[str, ...] = ()
    alternatives: Tuple[str, ...] = ()


class LanguageTargeting(_Frozen):
    value: Tuple[str, ...] = ()
    alternatives: Tuple[str, ...] = ()


class AssetsDirectoryTargeting(_Frozen):
    abi: Optional[AbiTargeting] = None
    graphics_api: Optional[GraphicsApiTargeting] = None
    texture_compression_format: Optional[TextureCompressionFormatTargeting] = None
    language: Optional[LanguageTargeting] = None


class TargetingDimension(str, Enum):
    ABI = "ABI"
    GRAPHICS_API = "GRAPHICS_API"
    TEXTURE_COMPRESSION_FORMAT = "TEXTURE_COMPRESSION_FORMAT"
    LANGUAGE = "LANGUAGE"


def sdk_version_from(value: int) -> SdkVersion:
    return SdkVersion(min=value)


def sdk_version_targeting(
    primary: SdkVersion,
    alternatives: Iterable[SdkVersion] = (),
) -> SdkVersionTargeting:
    """Targeting with a single primary; alternatives are deduplicated and sorted by min."""
    alts = sorted(set(alternatives), key=lambda v: v.min)
    return SdkVersionTargeting(value=(primary,), alternatives=tuple(alts))


def variant_targeting_for_sdk(min_sdk: int, alternatives: Iterable[int] = ()) -> VariantTargeting:
    return VariantTargeting(
        sdk_version_targeting=sdk_version_targeting(
            sdk_version_from(min_sdk),
            [sdk_version_from(a) for a in alternatives],
        )
    )
