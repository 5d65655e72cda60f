"""Template-key selection for (asset type, jewelry type) pairs."""

from typing import Any

from models.assets import AssetType
from models.jewelry import JewelryType
from services.prompts.templates import TemplateKey


def _template_family(asset_type: AssetType, jewelry_type: JewelryType) -> TemplateKey:
    if asset_type is AssetType.STAGING:
        return TemplateKey.STAGING
    if asset_type is AssetType.MODEL:
        if jewelry_type is JewelryType.NECKLACE:
            return TemplateKey.MODEL_NECKLACE
        if jewelry_type is JewelryType.EARRINGS:
            return TemplateKey.MODEL_EARRINGS
        return TemplateKey.MODEL_RING
    if asset_type is AssetType.WHITE_BG:
        if jewelry_type is JewelryType.EARRINGS:
            return TemplateKey.WHITE_BG_EARRINGS
        return TemplateKey.WHITE_BG_GENERAL
    if asset_type is AssetType.DESCRIPTION:
        if jewelry_type is JewelryType.EARRINGS:
            return TemplateKey.DESCRIPTION_EARRINGS
        return TemplateKey.DESCRIPTION_NECKLACE
    if asset_type is AssetType.SOCIAL_POST:
        return TemplateKey.SOCIAL
    raise ValueError(f"No template family for asset type {asset_type!r}")


# Built over every combination so a new enum member without a family fails at import
TEMPLATE_KEY_TABLE: dict[tuple[AssetType, JewelryType], TemplateKey] = {
    (asset_type, jewelry_type): _template_family(asset_type, jewelry_type)
    for asset_type in AssetType
    for jewelry_type in JewelryType
}


def select_template_key(asset_type: AssetType, jewelry_type: Any) -> TemplateKey:
    """Pick the template for an asset type and jewelry type.

    Total: jewelry types that are not recognised resolve to OTHER and take the
    default branch of their asset type's family.

    Args:
        asset_type: Asset being generated
        jewelry_type: JewelryType member or its label

    Returns:
        The template key to render
    """
    return TEMPLATE_KEY_TABLE[(AssetType.parse(asset_type), JewelryType.parse(jewelry_type))]
