# Data models for atelier
from .jewelry import (
    JewelryType,
    NecklaceLength,
    EarringLength,
    StagingSurface,
    LightingMood,
    StagingLayout,
    WhiteBgAngle,
    WhiteBgFraming,
    WhiteBgShadow,
    ModelSkinTone,
    ModelClothing,
    ModelShotType,
    ModelBackground,
    ModelLighting,
    ProductDetails,
    JewelryItem,
)
from .assets import (
    AssetType,
    OutputModality,
    InputImage,
    GeneratedAsset,
    AssetFailure,
    BatchResult,
)

__all__ = [
    "JewelryType",
    "NecklaceLength",
    "EarringLength",
    # Per-field choices
    "StagingSurface",
    "LightingMood",
    "StagingLayout",
    "WhiteBgAngle",
    "WhiteBgFraming",
    "WhiteBgShadow",
    "ModelSkinTone",
    "ModelClothing",
    "ModelShotType",
    "ModelBackground",
    "ModelLighting",
    "ProductDetails",
    "JewelryItem",
    # Generation
    "AssetType",
    "OutputModality",
    "InputImage",
    "GeneratedAsset",
    "AssetFailure",
    "BatchResult",
]
