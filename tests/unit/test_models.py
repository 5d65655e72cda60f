"""Unit tests for data models."""

import pytest

from models.assets import (
    AssetFailure,
    AssetType,
    BatchResult,
    GeneratedAsset,
    InputImage,
    OutputModality,
)
from models.jewelry import (
    JewelryItem,
    JewelryType,
    NecklaceLength,
    ProductDetails,
    StagingSurface,
    WhiteBgAngle,
)
from services.prompts import derive_variables


class TestJewelryType:
    """Tests for JewelryType parsing."""

    @pytest.mark.parametrize("value", ["Earrings", "earrings", "EARRINGS", JewelryType.EARRINGS])
    def test_parse_known(self, value):
        assert JewelryType.parse(value) is JewelryType.EARRINGS

    @pytest.mark.parametrize("value", ["Brooch", "", None])
    def test_parse_unknown_is_other(self, value):
        assert JewelryType.parse(value) is JewelryType.OTHER


class TestProductDetails:
    """Tests for ProductDetails."""

    def test_from_dict_accepts_camel_case(self):
        details = ProductDetails.from_dict(
            {
                "name": "Aurora",
                "type": "Necklace",
                "necklaceLength": 'Choker (14-16")',
                "stagingSurface": "Polished Marble",
                "stagingProps": ["Gift Box"],
            }
        )
        assert details.name == "Aurora"
        assert details.type is JewelryType.NECKLACE
        assert details.necklace_length is NecklaceLength.CHOKER
        assert details.staging_surface is StagingSurface.MARBLE
        assert details.staging_props == ["Gift Box"]

    def test_from_dict_accepts_snake_case(self):
        details = ProductDetails.from_dict({"white_bg_angle": "45° Angle", "clasp_type": "Toggle"})
        assert details.white_bg_angle is WhiteBgAngle.ANGLE_45
        assert details.clasp_type == "Toggle"

    def test_unknown_choice_kept_as_string(self):
        details = ProductDetails.from_dict({"stagingSurface": "Moss"})
        assert details.staging_surface == "Moss"
        assert not isinstance(details.staging_surface, StagingSurface)

    def test_unknown_keys_ignored(self):
        details = ProductDetails.from_dict({"name": "Aurora", "sparkle": 11})
        assert details.name == "Aurora"

    def test_empty_choice_is_none(self):
        assert ProductDetails(lighting_mood="").lighting_mood is None

    def test_to_dict_emits_camel_case_strings(self):
        data = ProductDetails.studio_defaults(name="Aurora").to_dict()
        assert data["name"] == "Aurora"
        assert data["type"] == "Necklace"
        assert data["necklaceLength"] == 'Choker (14-16")'
        assert data["whiteBgFraming"] == "Detailed Close-Up"
        assert data["stagingProps"] == ["Gift Box", "Silk Ribbon", "Linen Fabric"]
        assert data["earringLength"] is None

    def test_to_dict_round_trips_through_from_dict(self):
        details = ProductDetails.studio_defaults(name="Aurora", stone="Opal")
        assert ProductDetails.from_dict(details.to_dict()) == details

    def test_blank_props_dropped(self):
        assert ProductDetails(staging_props=["Gift Box", " ", ""]).staging_props == ["Gift Box"]

    def test_single_prop_string_is_one_prop(self):
        details = ProductDetails.from_dict({"type": "Ring", "stagingProps": "Gift Box"})

        assert details.staging_props == ["Gift Box"]
        assert derive_variables(details)["propsInstruction"] == (
            "Add props such as Gift Box that accent the ring."
        )

    def test_comma_separated_props_string_is_split(self):
        details = ProductDetails.from_dict({"stagingProps": "Gift Box, Silk Ribbon,"})
        assert details.staging_props == ["Gift Box", "Silk Ribbon"]


class TestJewelryItem:
    """Tests for JewelryItem."""

    def test_to_dict(self):
        details = ProductDetails(name="Aurora", type=JewelryType.RING)
        item = JewelryItem(id="item-1", name="Aurora", type=JewelryType.RING, details=details)
        data = item.to_dict()
        assert data["id"] == "item-1"
        assert data["type"] == "Ring"
        assert data["details"]["name"] == "Aurora"
        assert data["images"] == []
        assert "created_at" in data


class TestAssetType:
    """Tests for AssetType."""

    def test_modalities_are_fixed(self):
        assert AssetType.STAGING.modality is OutputModality.IMAGE
        assert AssetType.MODEL.modality is OutputModality.IMAGE
        assert AssetType.WHITE_BG.modality is OutputModality.IMAGE
        assert AssetType.DESCRIPTION.modality is OutputModality.TEXT
        assert AssetType.SOCIAL_POST.modality is OutputModality.TEXT

    @pytest.mark.parametrize("value", ["WHITE_BG", "White Background", "white_bg"])
    def test_parse(self, value):
        assert AssetType.parse(value) is AssetType.WHITE_BG

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown asset type"):
            AssetType.parse("Hologram")


class TestInputImage:
    """Tests for InputImage."""

    def test_data_url_round_trip(self, png_bytes):
        image = InputImage(data=png_bytes, mime_type="image/png", filename="a.png")
        decoded = InputImage.from_data_url(image.to_data_url())
        assert decoded.data == png_bytes
        assert decoded.mime_type == "image/png"

    def test_from_data_url_rejects_plain_url(self):
        with pytest.raises(ValueError):
            InputImage.from_data_url("https://example.com/logo.png")

    def test_from_path_guesses_mime_type(self, tmp_path, png_bytes):
        path = tmp_path / "photo.png"
        path.write_bytes(png_bytes)
        image = InputImage.from_path(path)
        assert image.mime_type == "image/png"
        assert image.filename == "photo.png"


class TestBatchResult:
    """Tests for BatchResult."""

    def test_no_failures_no_notice(self):
        result = BatchResult(succeeded=[GeneratedAsset(AssetType.SOCIAL_POST, "Post", False)])
        assert result.error_notice is None
        assert result.to_dict()["error"] is None

    def test_notice_lists_every_failure(self):
        result = BatchResult(
            failed=[
                AssetFailure(AssetType.STAGING, "quota exceeded"),
                AssetFailure(AssetType.MODEL, "No content generated."),
            ]
        )
        assert result.error_notice == (
            "Some assets failed: Staging Image: quota exceeded, Model Try-On: No content generated."
        )

    def test_generated_asset_from_dict_defaults_is_image(self):
        asset = GeneratedAsset.from_dict({"type": "White Background", "content": "data:image/png;base64,AA=="})
        assert asset.type is AssetType.WHITE_BG
        assert asset.is_image is True
