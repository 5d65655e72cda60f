"""Pydantic request/response models for the Atelier API."""

from pydantic import BaseModel, Field

# =============================================================================
# Response Models
# =============================================================================


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str

    model_config = {"json_schema_extra": {"examples": [{"message": "Operation completed successfully"}]}}


class RootResponse(BaseModel):
    """Root endpoint response."""

    message: str
    version: str

    model_config = {"json_schema_extra": {"examples": [{"message": "Atelier API", "version": "1.0.0"}]}}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    generation_configured: bool = False

    model_config = {"json_schema_extra": {"examples": [{"status": "healthy", "generation_configured": True}]}}


class GeneratedAssetResponse(BaseModel):
    """One generated asset (data URL for images, text otherwise)."""

    type: str
    content: str
    is_image: bool


class AssetFailureResponse(BaseModel):
    """One failed asset type within a batch."""

    asset_type: str
    message: str


class BatchResultResponse(BaseModel):
    """Settled batch: successes, failures and the combined notice."""

    succeeded: list[GeneratedAssetResponse]
    failed: list[AssetFailureResponse]
    error: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "succeeded": [
                        {"type": "Product Description", "content": "Golden Hour Necklace...", "is_image": False}
                    ],
                    "failed": [{"asset_type": "Staging Image", "message": "No content generated."}],
                    "error": "Some assets failed: Staging Image: No content generated.",
                }
            ]
        }
    }


class PromptPreviewResponse(BaseModel):
    """Rendered prompt for one asset type."""

    asset_type: str
    template_key: str
    prompt: str


class DetectTypeResponse(BaseModel):
    """Jewelry type detection result."""

    type: str
    detected: bool
    error: str | None = None

    model_config = {"json_schema_extra": {"examples": [{"type": "Earrings", "detected": True}]}}


class TemplateResponse(BaseModel):
    """One prompt template."""

    key: str
    content: str
    customized: bool = False


class TemplateListResponse(BaseModel):
    """All prompt templates."""

    templates: list[TemplateResponse]


class BrandSettingsResponse(BaseModel):
    """Brand settings."""

    logo_data_url: str | None = None
    logo_file_name: str | None = None
    use_default_logo: bool = True
    default_clasp_type: str
    default_accent_detail: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "logo_data_url": None,
                    "logo_file_name": None,
                    "use_default_logo": True,
                    "default_clasp_type": "Lobster",
                    "default_accent_detail": "Signature Tag",
                }
            ]
        }
    }


class ItemResponse(BaseModel):
    """Cataloged jewelry item."""

    id: str
    name: str
    type: str
    details: dict
    description: str | None = None
    images: list[str] = []
    created_at: str


class ItemListResponse(BaseModel):
    """List of items response."""

    items: list[ItemResponse]


class ItemAssetResponse(GeneratedAssetResponse):
    """Generated asset saved against an item."""

    id: int
    item_id: str
    created_at: str


class ItemAssetListResponse(BaseModel):
    """Saved assets of one item, newest first."""

    assets: list[ItemAssetResponse]


# =============================================================================
# Request Models
# =============================================================================


class PromptPreviewRequest(BaseModel):
    """Request body for a prompt preview."""

    asset_type: str
    details: dict = Field(default_factory=dict, description="Product details (camelCase or snake_case keys)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "asset_type": "Staging Image",
                    "details": {"name": "Golden Hour", "type": "Earrings", "stagingProps": ["Gift Box"]},
                }
            ]
        }
    }


class TemplateUpdateRequest(BaseModel):
    """Request body for editing one template."""

    content: str


class BrandSettingsUpdateRequest(BaseModel):
    """Partial brand settings update; omitted fields are left unchanged."""

    use_default_logo: bool | None = None
    default_clasp_type: str | None = None
    default_accent_detail: str | None = None


class ItemCreateRequest(BaseModel):
    """Request body for cataloging an item."""

    name: str = Field(..., min_length=1, max_length=200)
    details: dict = Field(default_factory=dict)
    description: str | None = None
    images: list[str] = Field(default_factory=list)


class ItemUpdateRequest(BaseModel):
    """Partial item update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    details: dict | None = None
    description: str | None = None
    images: list[str] | None = None
