"""Instruction tables: per-field choice -> descriptive sentence.

Every screen and entry point derives its prompt variables here so the tuned
wording stays identical everywhere. Each table has two fallbacks: ``unset``
when the field is empty and ``default`` (one of the table's own members) when
the value has no entry.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from models.jewelry import (
    JewelryType,
    LightingMood,
    ModelBackground,
    ModelClothing,
    ModelLighting,
    ModelShotType,
    ModelSkinTone,
    NecklaceLength,
    ProductDetails,
    StagingLayout,
    WhiteBgAngle,
    WhiteBgFraming,
    WhiteBgShadow,
    choice_value,
)
from services.prompts._base import stringify
from services.prompts.templates import TemplateKey


@dataclass(frozen=True)
class InstructionTable:
    """Lookup from one choice field to the sentence substituted into prompts."""

    field: str
    variable: str
    choices: type[Enum]
    sentences: dict
    default: Enum
    unset: str

    def lookup(self, value: Any) -> str:
        if value is None or value == "":
            return self.unset
        member = value if isinstance(value, self.choices) else _as_member(self.choices, value)
        return self.sentences.get(member, self.sentences[self.default])


def _as_member(choices: type[Enum], value: Any) -> Optional[Enum]:
    try:
        return choices(choice_value(value))
    except ValueError:
        return None


LIGHTING = InstructionTable(
    field="lighting_mood",
    variable="lightingInstruction",
    choices=LightingMood,
    sentences={
        LightingMood.SOFT: "The lighting should be soft, even, and professional, designed to highlight the intricate details, texture, and brilliance of the materials.",
        LightingMood.WARM: "The lighting should be warm and golden, creating a cozy, inviting atmosphere that brings out the warmth of the metals and stones.",
        LightingMood.COOL: "The lighting should be cool and bright, creating a clean, modern look that emphasizes clarity and sparkle.",
        LightingMood.DRAMATIC: "The lighting should be dramatic with deep shadows and selective highlights, creating an artistic, editorial atmosphere.",
    },
    default=LightingMood.SOFT,
    unset="The lighting should be soft, even, and professional, designed to highlight the intricate details, texture, and brilliance of the materials.",
)

LAYOUT = InstructionTable(
    field="staging_layout",
    variable="layoutInstruction",
    choices=StagingLayout,
    sentences={
        StagingLayout.FLAT_LAY: "laid flat with the camera positioned directly above for a clean aerial view",
        StagingLayout.DRAPED: "elegantly draped, with natural curves resting on the surface",
        StagingLayout.HANGING: "suspended or hanging, showing its natural drape and length",
    },
    default=StagingLayout.FLAT_LAY,
    unset="elegantly placed",
)

WHITE_BG_ANGLE = InstructionTable(
    field="white_bg_angle",
    variable="whiteBgAngleInstruction",
    choices=WhiteBgAngle,
    sentences={
        WhiteBgAngle.TOP_DOWN: "- Camera positioned directly above for a flat, aerial view",
        WhiteBgAngle.ANGLE_45: "- Camera at a 45-degree angle for depth and dimension",
        WhiteBgAngle.EYE_LEVEL: "- Camera at eye level for a straight-on view",
    },
    default=WhiteBgAngle.TOP_DOWN,
    unset="- Camera positioned for optimal product visibility",
)

WHITE_BG_FRAMING = InstructionTable(
    field="white_bg_framing",
    variable="whiteBgFramingInstruction",
    choices=WhiteBgFraming,
    sentences={
        WhiteBgFraming.CLOSE_UP: "- Tight framing, emphasizing fine details and craftsmanship",
        WhiteBgFraming.FULL_PRODUCT: "- Full product visible, centered in frame",
        WhiteBgFraming.WITH_PADDING: "- Generous white space around the product for flexibility",
    },
    default=WhiteBgFraming.FULL_PRODUCT,
    unset="- Product centered with appropriate framing",
)

WHITE_BG_SHADOW = InstructionTable(
    field="white_bg_shadow",
    variable="whiteBgShadowInstruction",
    choices=WhiteBgShadow,
    sentences={
        WhiteBgShadow.NONE: "- ZERO shadow, pure white underneath, no drop shadow whatsoever",
        WhiteBgShadow.NATURAL: "- Subtle, soft shadow for depth while keeping background clean",
        WhiteBgShadow.REFLECTION: "- Gentle mirror-like reflection below the product",
    },
    default=WhiteBgShadow.NONE,
    unset="- No shadow, pure white background",
)

MODEL_SKIN_TONE = InstructionTable(
    field="model_skin_tone",
    variable="modelSkinToneInstruction",
    choices=ModelSkinTone,
    sentences={
        ModelSkinTone.LIGHT: "- Model with light/fair skin tone",
        ModelSkinTone.MEDIUM: "- Model with medium/tan skin tone",
        ModelSkinTone.OLIVE: "- Model with olive skin tone",
        ModelSkinTone.DEEP: "- Model with deep/dark skin tone",
    },
    default=ModelSkinTone.MEDIUM,
    unset="- Model with natural, healthy skin",
)

MODEL_CLOTHING = InstructionTable(
    field="model_clothing",
    variable="modelClothingInstruction",
    choices=ModelClothing,
    sentences={
        ModelClothing.BLACK: "- Wearing a simple black top/shirt",
        ModelClothing.WHITE: "- Wearing a clean white top/shirt",
        ModelClothing.CREAM: "- Wearing a cream or nude colored top",
        ModelClothing.GRAY: "- Wearing a gray top/shirt",
        ModelClothing.NAVY: "- Wearing a navy blue top/shirt",
    },
    default=ModelClothing.BLACK,
    unset="- Wearing simple, neutral clothing",
)

MODEL_SHOT_TYPE = InstructionTable(
    field="model_shot_type",
    variable="modelShotTypeInstruction",
    choices=ModelShotType,
    sentences={
        ModelShotType.CLOSE_UP: "- Close-up shot focusing tightly on the jewelry area",
        ModelShotType.PORTRAIT: "- Portrait shot showing head and shoulders",
        ModelShotType.LIFESTYLE: "- Wider lifestyle shot with environmental context",
    },
    default=ModelShotType.CLOSE_UP,
    unset="- Elegant framing focused on the jewelry",
)

MODEL_BACKGROUND = InstructionTable(
    field="model_background",
    variable="modelBackgroundInstruction",
    choices=ModelBackground,
    sentences={
        ModelBackground.STUDIO: "- Clean, neutral studio background",
        ModelBackground.GRADIENT: "- Soft gradient background transitioning subtly",
        ModelBackground.LIFESTYLE: "- Blurred lifestyle/environmental background",
    },
    default=ModelBackground.STUDIO,
    unset="- Clean, non-distracting background",
)

MODEL_LIGHTING = InstructionTable(
    field="model_lighting",
    variable="modelLightingInstruction",
    choices=ModelLighting,
    sentences={
        ModelLighting.SOFT_NATURAL: "- Soft, natural lighting",
        ModelLighting.GOLDEN_HOUR: "- Warm, golden hour lighting for an aspirational feel",
        ModelLighting.STUDIO: "- Professional studio lighting setup",
    },
    default=ModelLighting.SOFT_NATURAL,
    unset="- Beautiful, flattering lighting",
)

INSTRUCTION_TABLES: tuple[InstructionTable, ...] = (
    LIGHTING,
    LAYOUT,
    WHITE_BG_ANGLE,
    WHITE_BG_FRAMING,
    WHITE_BG_SHADOW,
    MODEL_SKIN_TONE,
    MODEL_CLOTHING,
    MODEL_SHOT_TYPE,
    MODEL_BACKGROUND,
    MODEL_LIGHTING,
)

NECKLACE_LENGTH_DESCRIPTIONS: dict[NecklaceLength, str] = {
    NecklaceLength.COLLAR: "The necklace should fit tightly around the neck (12-14 inches).",
    NecklaceLength.CHOKER: "The necklace should sit at the base of the neck (14-16 inches).",
    NecklaceLength.PRINCESS: "The necklace should sit on the collarbone (17-19 inches).",
    NecklaceLength.MATINEE: "The necklace should sit between the collarbone and the bust (20-24 inches).",
    NecklaceLength.OPERA: "The necklace should hang low, below the bust (28-36 inches).",
    NecklaceLength.ROPE: "The necklace should hang very low, near the waist (over 36 inches).",
}

DEFAULT_SURFACE = "a luxurious, minimalist surface such as polished marble or smooth wood"

EARRINGS_LAYOUT = (
    "Lay the earrings flat and have the camera lens be from above to give an aerial viewpoint."
)
NO_LENGTH_CHANGES = "Do not add any lengths to the piece."


def props_instruction(details: ProductDetails) -> str:
    if not details.staging_props:
        return ""
    return (
        f"Add props such as {', '.join(details.staging_props)} "
        f"that accent the {details.type.value.lower()}."
    )


def type_specific_instruction(details: ProductDetails) -> str:
    if details.type is JewelryType.EARRINGS:
        return EARRINGS_LAYOUT
    return NO_LENGTH_CHANGES


def surface_instruction(details: ProductDetails) -> str:
    surface = choice_value(details.staging_surface)
    if not surface:
        return DEFAULT_SURFACE
    return f"a luxurious {surface.lower()} surface"


def necklace_length_description(length: Any) -> str:
    """Inch-range sentence for a necklace length, "" when unset or unknown."""
    member = _as_member(NecklaceLength, length) if length else None
    return NECKLACE_LENGTH_DESCRIPTIONS.get(member, "")


def derive_variables(
    details: ProductDetails, template_key: Optional[TemplateKey] = None
) -> dict[str, str]:
    """Compute every template variable for a product.

    Raw fields are passed through in camelCase (``type`` lowercased, unset
    fields as ""), followed by the derived instruction sentences. Never raises;
    every branch has a fallback.

    Args:
        details: Snapshot of the product form
        template_key: Template being rendered; ``lengthDescription`` is only
            added for MODEL_NECKLACE

    Returns:
        Variables keyed by placeholder name
    """
    variables = {name: stringify(value) for name, value in details.to_dict().items()}
    variables["type"] = details.type.value.lower()

    variables["propsInstruction"] = props_instruction(details)
    variables["typeSpecificInstruction"] = type_specific_instruction(details)
    variables["surfaceInstruction"] = surface_instruction(details)

    for table in INSTRUCTION_TABLES:
        variables[table.variable] = table.lookup(getattr(details, table.field))

    if template_key is TemplateKey.MODEL_NECKLACE:
        variables["lengthDescription"] = necklace_length_description(details.necklace_length)

    return variables
