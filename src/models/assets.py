"""Models for generated marketing assets and generation batches."""

import base64
import binascii
import mimetypes
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>[^;,]+)?(?:;[^,]*)?;base64,(?P<data>.*)$", re.DOTALL)


class OutputModality(str, Enum):
    """What the generation backend is asked to produce."""

    IMAGE = "image"
    TEXT = "text"


class AssetType(str, Enum):
    """Generation targets: three image outputs, two text outputs."""

    STAGING = "Staging Image"
    MODEL = "Model Try-On"
    WHITE_BG = "White Background"
    DESCRIPTION = "Product Description"
    SOCIAL_POST = "Social Media Post"

    @property
    def modality(self) -> OutputModality:
        """Output modality; fixed per asset type."""
        return _MODALITIES[self]

    @property
    def is_image(self) -> bool:
        return self.modality is OutputModality.IMAGE

    @classmethod
    def parse(cls, value: Any) -> "AssetType":
        """Resolve a member, its name or its value.

        Raises:
            ValueError: If the value names no asset type
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text in (member.name, member.value) or text.upper() == member.name:
                return member
        raise ValueError(f"Unknown asset type: {value}")


_MODALITIES = {
    AssetType.STAGING: OutputModality.IMAGE,
    AssetType.MODEL: OutputModality.IMAGE,
    AssetType.WHITE_BG: OutputModality.IMAGE,
    AssetType.DESCRIPTION: OutputModality.TEXT,
    AssetType.SOCIAL_POST: OutputModality.TEXT,
}


@dataclass
class InputImage:
    """An image handed to the generation backend (product photo or logo)."""

    data: bytes
    mime_type: str = "image/jpeg"
    filename: str = "image.jpg"

    @classmethod
    def from_data_url(cls, data_url: str, filename: str = "image.png") -> "InputImage":
        """Decode a ``data:<mime>;base64,...`` URL.

        Raises:
            ValueError: If the URL is not a base64 data URL
        """
        match = DATA_URL_PATTERN.match(data_url.strip())
        if not match:
            raise ValueError("Not a base64 data URL")
        try:
            data = base64.b64decode(match.group("data"), validate=False)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Invalid base64 payload: {e}") from e
        return cls(data=data, mime_type=match.group("mime") or "image/png", filename=filename)

    @classmethod
    def from_path(cls, path: str | Path) -> "InputImage":
        """Read an image file, guessing its MIME type from the extension."""
        path = Path(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(data=path.read_bytes(), mime_type=mime_type or "image/jpeg", filename=path.name)

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


@dataclass
class GeneratedAsset:
    """One generated asset; ``content`` is a data URL for images, else text."""

    type: AssetType
    content: str
    is_image: bool

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses and storage."""
        return {
            "type": self.type.value,
            "content": self.content,
            "is_image": self.is_image,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedAsset":
        asset_type = AssetType.parse(data["type"])
        is_image = data.get("is_image", data.get("isImage"))
        return cls(
            type=asset_type,
            content=data.get("content", ""),
            is_image=asset_type.is_image if is_image is None else bool(is_image),
        )


@dataclass
class AssetFailure:
    """A per-type failure within a batch."""

    asset_type: AssetType
    message: str

    def to_dict(self) -> dict:
        return {"asset_type": self.asset_type.value, "message": self.message}


@dataclass
class BatchResult:
    """Settled outcome of a generation batch.

    Both lists follow the order in which asset types were requested.
    """

    succeeded: list[GeneratedAsset] = field(default_factory=list)
    failed: list[AssetFailure] = field(default_factory=list)

    @property
    def error_notice(self) -> Optional[str]:
        """Single user-facing notice for all failures, or None."""
        if not self.failed:
            return None
        details = ", ".join(f"{f.asset_type.value}: {f.message}" for f in self.failed)
        return f"Some assets failed: {details}"

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "succeeded": [a.to_dict() for a in self.succeeded],
            "failed": [f.to_dict() for f in self.failed],
            "error": self.error_notice,
        }
