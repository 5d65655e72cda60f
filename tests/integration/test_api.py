"""Integration tests for the Atelier HTTP API.

Runs the FastAPI app with the Gemini backend mocked and stores under tmp_path.
"""

import json
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api import dependencies
from api.server import app
from models.assets import AssetType, OutputModality
from services.asset_orchestrator import AssetOrchestrator
from services.brand_settings import BrandSettingsStore
from services.generation_service import GenerationResponse, GenerationServiceError
from services.item_store import ItemStore
from services.prompts import DEFAULT_TEMPLATES, TemplateKey


@pytest.fixture
def brand_store(tmp_path):
    return BrandSettingsStore(tmp_path / "brand_settings.json")


@pytest.fixture
def client(tmp_path, monkeypatch, mock_generation_service, template_store, brand_store):
    monkeypatch.setattr(dependencies, "_generation_service", mock_generation_service)
    monkeypatch.setattr(dependencies, "_template_store", template_store)
    monkeypatch.setattr(
        dependencies, "_orchestrator", AssetOrchestrator(mock_generation_service, template_store)
    )
    monkeypatch.setattr(dependencies, "_brand_store", brand_store)
    monkeypatch.setattr(dependencies, "_item_store", ItemStore(tmp_path / "items.db"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def upload(png_bytes):
    return [("files", ("necklace.png", png_bytes, "image/png"))]


def _details(**overrides) -> str:
    data = {"name": "Golden Hour", "type": "Necklace", "stone": "Citrine"}
    data.update(overrides)
    return json.dumps(data)


@pytest.mark.integration
class TestCore:
    def test_root(self, client):
        assert client.get("/").json() == {"message": "Atelier API", "version": "1.0.0"}

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "healthy", "generation_configured": True}


@pytest.mark.integration
class TestGenerate:
    """Tests for POST /api/assets/generate."""

    def test_generates_selected_assets(self, client, upload, mock_generation_service):
        response = client.post(
            "/api/assets/generate",
            files=upload,
            data={"asset_types": ["STAGING", "Product Description"], "details": _details()},
        )

        assert response.status_code == 200
        body = response.json()
        assert [a["type"] for a in body["succeeded"]] == ["Staging Image", "Product Description"]
        assert body["succeeded"][0]["is_image"] is True
        assert body["failed"] == []
        assert body["error"] is None
        assert mock_generation_service.generate.await_count == 2

    def test_brand_logo_sent_with_staging_only(self, client, upload, brand_store, logo_image, mock_generation_service):
        brand_store.set_logo(logo_image)

        client.post(
            "/api/assets/generate",
            files=upload,
            data={"asset_types": ["STAGING", "WHITE_BG"], "details": _details()},
        )

        images_by_type = {
            call.args[0].prompt.startswith("Generate a high-resolution product image"): len(call.args[0].images)
            for call in mock_generation_service.generate.await_args_list
        }
        # staging carries the photo and the logo, white background only the photo
        assert images_by_type == {True: 2, False: 1}

    def test_brand_defaults_fill_empty_fields(self, client, upload, mock_generation_service):
        client.post(
            "/api/assets/generate",
            files=upload,
            data={"asset_types": ["DESCRIPTION"], "details": _details()},
        )

        prompt = mock_generation_service.generate.await_args.args[0].prompt
        assert "Lobster" in prompt

    def test_partial_failure(self, client, upload, mock_generation_service, png_bytes):
        async def generate(request):
            if request.modality is OutputModality.TEXT:
                raise GenerationServiceError("quota exceeded")
            return GenerationResponse(image_bytes=png_bytes, mime_type="image/png")

        mock_generation_service.generate.side_effect = generate

        body = client.post(
            "/api/assets/generate",
            files=upload,
            data={"asset_types": ["STAGING", "SOCIAL_POST"], "details": _details()},
        ).json()

        assert [a["type"] for a in body["succeeded"]] == ["Staging Image"]
        assert body["failed"] == [{"asset_type": "Social Media Post", "message": "quota exceeded"}]
        assert body["error"] == "Some assets failed: Social Media Post: quota exceeded"

    def test_no_images_is_400(self, client):
        response = client.post(
            "/api/assets/generate", data={"asset_types": ["STAGING"], "details": _details()}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Please upload at least one image."

    def test_no_asset_types_is_400(self, client, upload):
        response = client.post("/api/assets/generate", files=upload, data={"details": _details()})
        assert response.status_code == 400
        assert response.json()["detail"] == "Please select at least one asset type to generate."

    def test_unknown_asset_type_is_400(self, client, upload):
        response = client.post(
            "/api/assets/generate", files=upload, data={"asset_types": ["HOLOGRAM"], "details": _details()}
        )
        assert response.status_code == 400

    def test_invalid_details_is_400(self, client, upload):
        response = client.post(
            "/api/assets/generate", files=upload, data={"asset_types": ["STAGING"], "details": "{nope"}
        )
        assert response.status_code == 400

    def test_unconfigured_backend_is_503(self, client, upload, mock_generation_service):
        mock_generation_service.is_configured.return_value = False

        response = client.post(
            "/api/assets/generate", files=upload, data={"asset_types": ["STAGING"], "details": _details()}
        )

        assert response.status_code == 503
        mock_generation_service.generate.assert_not_awaited()

    def test_saves_successes_to_item(self, client, upload):
        item = client.post("/api/items", json={"name": "Golden Hour", "details": {"type": "Necklace"}}).json()

        client.post(
            "/api/assets/generate",
            files=upload,
            data={"asset_types": ["SOCIAL_POST"], "details": _details(), "item_id": item["id"]},
        )

        assets = client.get(f"/api/items/{item['id']}/assets").json()["assets"]
        assert [a["type"] for a in assets] == ["Social Media Post"]

    def test_invalid_batch_skips_logo_lookup(self, client, brand_store, monkeypatch):
        get_logo = AsyncMock(return_value=None)
        monkeypatch.setattr(brand_store, "get_effective_logo", get_logo)

        response = client.post(
            "/api/assets/generate", data={"asset_types": ["STAGING"], "details": _details()}
        )

        assert response.status_code == 400
        get_logo.assert_not_awaited()

    def test_unknown_item_is_404(self, client, upload, mock_generation_service):
        response = client.post(
            "/api/assets/generate",
            files=upload,
            data={"asset_types": ["STAGING"], "details": _details(), "item_id": "missing"},
        )
        assert response.status_code == 404
        mock_generation_service.generate.assert_not_awaited()


@pytest.mark.integration
class TestRegenerate:
    def test_replaces_one_entry(self, client, upload):
        displayed = [
            {"type": "Staging Image", "content": "data:image/png;base64,AA==", "is_image": True},
            {"type": "Social Media Post", "content": "Old post", "is_image": False},
        ]

        body = client.post(
            "/api/assets/regenerate",
            files=upload,
            data={"asset_type": "SOCIAL_POST", "details": _details(), "assets": json.dumps(displayed)},
        ).json()

        assert body["succeeded"][0] == displayed[0]
        assert body["succeeded"][1]["content"] == "A luminous piece for every day."
        assert body["failed"] == []

    def test_unconfigured_backend_skips_logo_lookup(self, client, upload, brand_store, mock_generation_service, monkeypatch):
        mock_generation_service.is_configured.return_value = False
        get_logo = AsyncMock(return_value=None)
        monkeypatch.setattr(brand_store, "get_effective_logo", get_logo)

        response = client.post(
            "/api/assets/regenerate",
            files=upload,
            data={"asset_type": "STAGING", "details": _details(), "assets": "[]"},
        )

        assert response.status_code == 503
        get_logo.assert_not_awaited()

    def test_invalid_assets_json_is_400(self, client, upload):
        response = client.post(
            "/api/assets/regenerate",
            files=upload,
            data={"asset_type": "SOCIAL_POST", "details": _details(), "assets": "[{"},
        )
        assert response.status_code == 400


@pytest.mark.integration
class TestPromptPreview:
    def test_renders_without_backend_call(self, client, mock_generation_service):
        response = client.post(
            "/api/assets/prompt",
            json={
                "asset_type": "Staging Image",
                "details": {"type": "Earrings", "stagingProps": ["Gift Box", "Silk Ribbon"]},
            },
        )

        body = response.json()
        assert body["template_key"] == "STAGING"
        assert "Add props such as Gift Box, Silk Ribbon that accent the earrings." in body["prompt"]
        mock_generation_service.generate.assert_not_awaited()

    def test_single_prop_string(self, client):
        body = client.post(
            "/api/assets/prompt",
            json={"asset_type": "STAGING", "details": {"type": "Ring", "stagingProps": "Gift Box"}},
        ).json()
        assert "Add props such as Gift Box that accent the ring." in body["prompt"]

    def test_model_necklace_key(self, client):
        body = client.post(
            "/api/assets/prompt",
            json={"asset_type": "MODEL", "details": {"type": "Necklace", "necklaceLength": 'Choker (14-16")'}},
        ).json()
        assert body["template_key"] == "MODEL_NECKLACE"
        assert "(14-16 inches)" in body["prompt"]


@pytest.mark.integration
class TestDetectType:
    def test_detects(self, client, png_bytes):
        response = client.post("/api/detect-type", files={"file": ("p.png", png_bytes, "image/png")})
        assert response.json() == {"type": "Earrings", "detected": True, "error": None}

    def test_failure_falls_back(self, client, png_bytes, mock_generation_service):
        mock_generation_service.detect_jewelry_type.side_effect = GenerationServiceError("Overloaded")

        response = client.post(
            "/api/detect-type",
            files={"file": ("p.png", png_bytes, "image/png")},
            data={"fallback_type": "Ring"},
        )

        assert response.json() == {"type": "Ring", "detected": False, "error": "Overloaded"}

    def test_failure_without_fallback_is_503(self, client, png_bytes, mock_generation_service):
        mock_generation_service.detect_jewelry_type.side_effect = GenerationServiceError("Overloaded")
        response = client.post("/api/detect-type", files={"file": ("p.png", png_bytes, "image/png")})
        assert response.status_code == 503


@pytest.mark.integration
class TestTemplates:
    def test_list(self, client):
        templates = client.get("/api/templates").json()["templates"]
        assert {t["key"] for t in templates} == {k.value for k in TemplateKey}
        assert not any(t["customized"] for t in templates)

    def test_edit_and_reset(self, client, template_store):
        response = client.put("/api/templates/SOCIAL", json={"content": "Meet {{name}}."})
        assert response.json() == {"key": "SOCIAL", "content": "Meet {{name}}.", "customized": True}
        assert template_store.get(TemplateKey.SOCIAL) == "Meet {{name}}."

        client.post("/api/templates/reset")
        assert template_store.get(TemplateKey.SOCIAL) == DEFAULT_TEMPLATES[TemplateKey.SOCIAL]

    def test_unknown_key_is_404(self, client):
        assert client.put("/api/templates/BANNER", json={"content": "x"}).status_code == 404


@pytest.mark.integration
class TestBrand:
    def test_get_and_update(self, client):
        assert client.get("/api/brand").json()["default_clasp_type"] == "Lobster"

        body = client.put("/api/brand", json={"default_accent_detail": "Heart Charm"}).json()

        assert body["default_accent_detail"] == "Heart Charm"
        assert body["default_clasp_type"] == "Lobster"

    def test_logo_lifecycle(self, client, png_bytes):
        uploaded = client.post("/api/brand/logo", files={"file": ("logo.png", png_bytes, "image/png")}).json()
        assert uploaded["logo_file_name"] == "logo.png"
        assert uploaded["logo_data_url"].startswith("data:image/png;base64,")

        cleared = client.delete("/api/brand/logo").json()
        assert cleared["logo_data_url"] is None
        assert cleared["use_default_logo"] is False

        restored = client.post("/api/brand/logo/default").json()
        assert restored["use_default_logo"] is True

    def test_non_image_logo_is_400(self, client):
        response = client.post("/api/brand/logo", files={"file": ("notes.txt", b"hello", "text/plain")})
        assert response.status_code == 400


@pytest.mark.integration
class TestItems:
    def test_crud(self, client):
        created = client.post(
            "/api/items",
            json={"name": "Dewdrop", "details": {"type": "Earrings", "stone": "Moonstone"}},
        )
        assert created.status_code == 201
        item = created.json()
        assert item["type"] == "Earrings"
        assert item["details"]["name"] == "Dewdrop"

        assert client.get(f"/api/items/{item['id']}").json()["name"] == "Dewdrop"
        assert [i["id"] for i in client.get("/api/items").json()["items"]] == [item["id"]]

        updated = client.put(f"/api/items/{item['id']}", json={"description": "Moonlit drops."}).json()
        assert updated["description"] == "Moonlit drops."
        assert updated["details"]["stone"] == "Moonstone"

        assert client.delete(f"/api/items/{item['id']}").status_code == 200
        assert client.get(f"/api/items/{item['id']}").status_code == 404

    def test_unknown_item_assets_is_404(self, client):
        assert client.get("/api/items/missing/assets").status_code == 404


@pytest.mark.integration
def test_asset_type_labels_match_api(client):
    """Every asset type label is accepted by the preview endpoint."""
    for asset_type in AssetType:
        response = client.post("/api/assets/prompt", json={"asset_type": asset_type.value, "details": {}})
        assert response.status_code == 200
