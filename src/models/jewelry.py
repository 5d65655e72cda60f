"""Jewelry product models: type, per-field choice enums and product details."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union


class JewelryType(str, Enum):
    """Kinds of jewelry the studio understands."""

    NECKLACE = "Necklace"
    EARRINGS = "Earrings"
    RING = "Ring"
    BRACELET = "Bracelet"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: Any) -> "JewelryType":
        """Resolve a member, value or name; anything unknown becomes OTHER."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if text in (member.value.lower(), member.name.lower()):
                return member
        return cls.OTHER


class NecklaceLength(str, Enum):
    """Standard necklace lengths."""

    COLLAR = 'Collar (12-14")'
    CHOKER = 'Choker (14-16")'
    PRINCESS = 'Princess (17-19")'
    MATINEE = 'Matinee (20-24")'
    OPERA = 'Opera (28-36")'
    ROPE = 'Rope (Over 36")'


class EarringLength(str, Enum):
    """Earring drop lengths."""

    STUD = "Stud / Button"
    HUGGIE = "Huggie / Small Hoop"
    SHORT_DROP = 'Short Drop (0.5"-1")'
    MEDIUM_DROP = 'Medium Drop (1"-2")'
    LONG_DROP = 'Long Drop (2"+)'
    SHOULDER = "Shoulder Duster"
    HOOP = "Large Hoop"


class StagingSurface(str, Enum):
    """Surfaces for staged (lifestyle) shots."""

    MARBLE = "Polished Marble"
    WOOD = "Smooth Wood Block"
    VELVET = "Rich Velvet Fabric"
    LINEN = "Natural Linen"
    SLATE = "Dark Slate Stone"


class LightingMood(str, Enum):
    """Lighting moods for staged shots."""

    SOFT = "Soft & Even"
    WARM = "Warm Golden"
    COOL = "Cool & Bright"
    DRAMATIC = "Dramatic & Moody"


class StagingLayout(str, Enum):
    """How the piece is placed in a staged shot."""

    FLAT_LAY = "Flat Lay (Aerial View)"
    DRAPED = "Draped on Surface"
    HANGING = "Hanging / Suspended"


class WhiteBgAngle(str, Enum):
    """Camera angles for white-background product shots."""

    TOP_DOWN = "Top-Down (Aerial)"
    ANGLE_45 = "45° Angle"
    EYE_LEVEL = "Eye Level"
    SIDE_VIEW = "Side View"
    THREE_QUARTER = "3/4 View"
    FLAT_LAY = "Flat Lay"
    DYNAMIC_PAIR = "Dynamic Pair (Front & Side)"


class WhiteBgFraming(str, Enum):
    """Framing for white-background product shots."""

    FULL_PRODUCT = "Full Product"
    CLOSE_UP = "Detailed Close-Up"
    WITH_PADDING = "With Padding"
    MACRO = "Extreme Macro (Texture)"


class WhiteBgShadow(str, Enum):
    """Shadow treatment for white-background product shots."""

    NONE = "No Shadow (Pure White)"
    NATURAL = "Soft Natural Shadow"
    REFLECTION = "Reflection"


class ModelSkinTone(str, Enum):
    """Model skin tones for try-on shots."""

    LIGHT = "Light"
    MEDIUM = "Medium"
    OLIVE = "Olive"
    DEEP = "Deep"


class ModelClothing(str, Enum):
    """Model clothing colors for try-on shots."""

    BLACK = "Black"
    WHITE = "White"
    CREAM = "Cream/Nude"
    GRAY = "Gray"
    NAVY = "Navy"


class ModelShotType(str, Enum):
    """Framing of try-on shots."""

    CLOSE_UP = "Close-Up (Jewelry Focus)"
    PORTRAIT = "Portrait (Head & Shoulders)"
    LIFESTYLE = "Lifestyle"


class ModelBackground(str, Enum):
    """Backgrounds for try-on shots."""

    STUDIO = "Studio Neutral"
    GRADIENT = "Soft Gradient"
    LIFESTYLE = "Blurred Lifestyle"
    ELEGANT = "Elegant Lifestyle"


class ModelLighting(str, Enum):
    """Lighting for try-on shots."""

    SOFT_NATURAL = "Soft Natural"
    GOLDEN_HOUR = "Golden Hour"
    STUDIO = "Studio Professional"


# Choice fields and the enum each one draws from. Values outside the enum are
# kept as plain strings.
CHOICE_FIELDS: dict[str, type[Enum]] = {
    "necklace_length": NecklaceLength,
    "earring_length": EarringLength,
    "staging_surface": StagingSurface,
    "lighting_mood": LightingMood,
    "staging_layout": StagingLayout,
    "white_bg_angle": WhiteBgAngle,
    "white_bg_framing": WhiteBgFraming,
    "white_bg_shadow": WhiteBgShadow,
    "model_skin_tone": ModelSkinTone,
    "model_clothing": ModelClothing,
    "model_shot_type": ModelShotType,
    "model_background": ModelBackground,
    "model_lighting": ModelLighting,
}

Choice = Union[Enum, str, None]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _coerce_choice(enum_cls: type[Enum], value: Any) -> Choice:
    if value is None or value == "":
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return str(value)


def choice_value(value: Any) -> str:
    """Plain string form of a choice field (enum value, raw string or "")."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass
class ProductDetails:
    """Structured attributes of one jewelry item being edited.

    ``type`` decides which fields are meaningful (``necklace_length`` only for
    necklaces, ``earring_length`` only for earrings, ...). The object does not
    enforce that; callers branch on ``type``.
    """

    name: str = ""
    type: JewelryType = JewelryType.NECKLACE
    stone: str = ""
    shape: str = ""
    material: str = ""
    visual_characteristic: str = ""
    stone_dimensions: str = ""
    stone_grade: str = ""
    necklace_length: Choice = None
    necklace_length_value: str = ""
    clasp_type: str = ""
    chain_material: str = ""
    hook_type: str = ""
    earring_length: Choice = None
    staging_props: list[str] = field(default_factory=list)
    staging_surface: Choice = None
    lighting_mood: Choice = None
    staging_layout: Choice = None
    white_bg_angle: Choice = None
    white_bg_framing: Choice = None
    white_bg_shadow: Choice = None
    model_skin_tone: Choice = None
    model_clothing: Choice = None
    model_shot_type: Choice = None
    model_background: Choice = None
    model_lighting: Choice = None
    accent_detail: str = ""
    ideal_wear: str = ""
    charm_details: str = ""

    def __post_init__(self):
        self.type = JewelryType.parse(self.type)
        for name, enum_cls in CHOICE_FIELDS.items():
            setattr(self, name, _coerce_choice(enum_cls, getattr(self, name)))
        props = self.staging_props or []
        # A single string is a comma-separated list, not a sequence of letters
        if isinstance(props, str):
            props = props.split(",")
        self.staging_props = [str(p).strip() for p in props if str(p).strip()]

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ProductDetails":
        """Build from camelCase (wire form) or snake_case keys.

        Unknown keys are ignored; ``None`` values leave the field default.
        """
        data = data or {}
        kwargs = {}
        for f in fields(cls):
            for key in (_camel(f.name), f.name):
                if key in data and data[key] is not None:
                    kwargs[f.name] = data[key]
                    break
        return cls(**kwargs)

    @classmethod
    def studio_defaults(cls, **overrides) -> "ProductDetails":
        """Starting choices of the studio screen."""
        values = {
            "type": JewelryType.NECKLACE,
            "staging_layout": StagingLayout.DRAPED,
            "staging_surface": StagingSurface.MARBLE,
            "lighting_mood": LightingMood.SOFT,
            "staging_props": ["Gift Box", "Silk Ribbon", "Linen Fabric"],
            "white_bg_angle": WhiteBgAngle.TOP_DOWN,
            "white_bg_framing": WhiteBgFraming.CLOSE_UP,
            "white_bg_shadow": WhiteBgShadow.NONE,
            "necklace_length": NecklaceLength.CHOKER,
            "model_skin_tone": ModelSkinTone.LIGHT,
            "model_clothing": ModelClothing.WHITE,
            "model_shot_type": ModelShotType.CLOSE_UP,
            "model_background": ModelBackground.STUDIO,
            "model_lighting": ModelLighting.SOFT_NATURAL,
        }
        values.update(overrides)
        return cls(**values)

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary for API responses and storage."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "staging_props":
                result[_camel(f.name)] = list(value)
            elif f.name == "type" or f.name in CHOICE_FIELDS:
                result[_camel(f.name)] = choice_value(value) or None
            else:
                result[_camel(f.name)] = value
        return result


@dataclass
class JewelryItem:
    """A cataloged jewelry item with its saved product details."""

    id: str
    name: str
    type: JewelryType
    details: ProductDetails
    description: Optional[str] = None
    images: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "details": self.details.to_dict(),
            "description": self.description,
            "images": list(self.images),
            "created_at": self.created_at.isoformat(),
        }
