"""Shared pytest fixtures for atelier tests."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from models.assets import InputImage, OutputModality
from models.jewelry import JewelryType, ProductDetails
from services.generation_service import GenerationResponse
from services.template_store import MemoryTemplateStorage, TemplateStore

# Smallest valid PNG (1x1 transparent pixel)
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c63000100000500010d0a2db40000000049454e44ae426082"
)


@pytest.fixture
def png_bytes() -> bytes:
    """Raw bytes of a 1x1 PNG."""
    return PNG_BYTES


@pytest.fixture
def product_image() -> InputImage:
    """A product photo for generation requests."""
    return InputImage(data=PNG_BYTES, mime_type="image/png", filename="product.png")


@pytest.fixture
def logo_image() -> InputImage:
    """A brand logo image."""
    return InputImage(data=b"logo-bytes", mime_type="image/jpeg", filename="logo.jpg")


@pytest.fixture
def sample_details() -> ProductDetails:
    """Studio defaults for a named necklace."""
    return ProductDetails.studio_defaults(
        name="Golden Hour",
        stone="Citrine",
        shape="Oval",
        material="18k Gold Vermeil",
        visual_characteristic="Warm honey glow",
        clasp_type="Lobster",
        accent_detail="Signature Tag",
    )


@pytest.fixture
def earring_details() -> ProductDetails:
    """Earrings staged with two props."""
    return ProductDetails.studio_defaults(
        name="Dewdrop",
        type=JewelryType.EARRINGS,
        stone="Moonstone",
        staging_props=["Gift Box", "Silk Ribbon"],
    )


@pytest.fixture
def template_store() -> TemplateStore:
    """Template store with factory defaults and in-memory persistence."""
    return TemplateStore(MemoryTemplateStorage()).load()


def make_response(request) -> GenerationResponse:
    """Successful backend payload matching the request modality."""
    if request.modality is OutputModality.IMAGE:
        return GenerationResponse(image_bytes=PNG_BYTES, mime_type="image/png")
    return GenerationResponse(text="A luminous piece for every day.")


@pytest.fixture
def mock_generation_service():
    """GenerationService double that answers every request successfully."""
    mock = MagicMock()
    mock.is_configured = MagicMock(return_value=True)
    mock.generate = AsyncMock(side_effect=make_response)
    mock.detect_jewelry_type = AsyncMock(return_value=JewelryType.EARRINGS)
    return mock
