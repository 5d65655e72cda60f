"""Integration tests for the generation pipeline.

Orchestrator, template store and the real GenerationService run together; only
the google-genai client is mocked.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from models.assets import AssetType
from models.jewelry import JewelryType, ProductDetails
from services.asset_orchestrator import AssetOrchestrator
from services.generation_service import GenerationService
from services.prompts import COPYWRITER_SYSTEM_INSTRUCTION


def _gemini_reply(model, contents, config):
    """Answer like Gemini: inline image for the image model, text otherwise."""
    if model == "gemini-3-pro-image-preview":
        if "e-commerce product shot" in contents[-1]:
            # White background refused
            part = SimpleNamespace(inline_data=None, text="I cannot do that.")
            return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))], text="I cannot do that.")
        part = SimpleNamespace(inline_data=SimpleNamespace(data=b"png", mime_type="image/png"), text=None)
        return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))], text=None)
    return SimpleNamespace(candidates=[], text=f"Copy for: {contents[-1][:20]}")


@pytest.fixture
def gemini_client():
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(side_effect=_gemini_reply)
    return client


@pytest.mark.integration
@pytest.mark.asyncio
async def test_full_batch_with_one_refusal(gemini_client, template_store, product_image, logo_image):
    orchestrator = AssetOrchestrator(GenerationService(client=gemini_client), template_store)
    details = ProductDetails.studio_defaults(name="Dewdrop", type=JewelryType.EARRINGS)

    result = await orchestrator.generate_batch([product_image], list(AssetType), details, logo=logo_image)

    assert [a.type for a in result.succeeded] == [
        AssetType.STAGING,
        AssetType.MODEL,
        AssetType.DESCRIPTION,
        AssetType.SOCIAL_POST,
    ]
    assert [f.asset_type for f in result.failed] == [AssetType.WHITE_BG]
    assert result.failed[0].message == "Generation failed: I cannot do that."
    assert result.succeeded[0].content == "data:image/png;base64,cG5n"

    calls = gemini_client.aio.models.generate_content.await_args_list
    assert len(calls) == len(AssetType)
    text_calls = [c for c in calls if c.kwargs["model"] == "gemini-2.5-flash"]
    assert len(text_calls) == 2
    assert all(c.kwargs["config"].system_instruction == COPYWRITER_SYSTEM_INSTRUCTION for c in text_calls)

    # photo + logo for staging only
    part_counts = sorted(len(c.kwargs["contents"]) - 1 for c in calls)
    assert part_counts == [1, 1, 1, 1, 2]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_regenerate_after_edit_uses_new_template(gemini_client, template_store, product_image):
    orchestrator = AssetOrchestrator(GenerationService(client=gemini_client), template_store)
    details = ProductDetails(name="Aurora", type=JewelryType.RING)
    first = await orchestrator.generate_batch([product_image], [AssetType.SOCIAL_POST], details)

    template_store.update("SOCIAL", "Short post about {{name}}")
    second = await orchestrator.regenerate(first.succeeded, AssetType.SOCIAL_POST, [product_image], details)

    assert second.succeeded[0].content == "Copy for: Short post about Aur"
