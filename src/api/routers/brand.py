"""Brand settings routes for the Atelier API."""

from api.dependencies import get_brand_store
from api.schemas import BrandSettingsResponse, BrandSettingsUpdateRequest
from fastapi import APIRouter, File, HTTPException, UploadFile
from models.assets import InputImage

router = APIRouter(tags=["Brand"])


@router.get("/api/brand", response_model=BrandSettingsResponse, summary="Get brand settings")
async def get_brand_settings() -> dict:
    """Current brand settings."""
    return get_brand_store().settings.to_dict()


@router.put("/api/brand", response_model=BrandSettingsResponse, summary="Update brand settings")
async def update_brand_settings(request: BrandSettingsUpdateRequest) -> dict:
    """Apply a partial settings update."""
    changes = {k: v for k, v in request.model_dump(exclude_unset=True).items() if v is not None}
    return get_brand_store().update(**changes).to_dict()


@router.post(
    "/api/brand/logo",
    response_model=BrandSettingsResponse,
    summary="Upload a custom logo",
    description="The logo is sent along with every staging image request.",
    responses={400: {"description": "Empty or non-image upload"}},
)
async def upload_logo(file: UploadFile = File(...)) -> dict:
    """Store a custom card logo."""
    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="Logo must be an image")

    image = InputImage(data=data, mime_type=content_type, filename=file.filename or "logo.png")
    return get_brand_store().set_logo(image).to_dict()


@router.delete("/api/brand/logo", response_model=BrandSettingsResponse, summary="Remove the logo")
async def clear_logo() -> dict:
    """Remove the custom logo and disable the default one."""
    return get_brand_store().clear_logo().to_dict()


@router.post(
    "/api/brand/logo/default",
    response_model=BrandSettingsResponse,
    summary="Use the default logo",
)
async def reset_to_default_logo() -> dict:
    """Remove the custom logo and fall back to the default one."""
    return get_brand_store().reset_to_default_logo().to_dict()
