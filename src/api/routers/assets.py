"""Asset generation routes for the Atelier API."""

import json
import logging

from api.dependencies import (
    get_brand_store,
    get_generation_service,
    get_item_store,
    get_orchestrator,
)
from api.schemas import (
    BatchResultResponse,
    DetectTypeResponse,
    PromptPreviewRequest,
    PromptPreviewResponse,
)
from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from models.assets import AssetType, GeneratedAsset, InputImage
from models.jewelry import JewelryType, ProductDetails
from services.generation_service import GenerationServiceError
from services.item_store import ItemNotFoundError
from services.prompts import select_template_key

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Assets"])


async def _read_images(files: list[UploadFile] | None) -> list[InputImage]:
    """Read uploaded photos into backend images, skipping empty parts."""
    images = []
    for upload in files or []:
        data = await upload.read()
        if data:
            images.append(
                InputImage(
                    data=data,
                    mime_type=upload.content_type or "image/jpeg",
                    filename=upload.filename or "image.jpg",
                )
            )
    return images


def _parse_details(raw: str) -> ProductDetails:
    """Parse the ``details`` form field and fill brand defaults."""
    try:
        data = json.loads(raw or "{}")
    except json.JSONDecodeError as e:
        raise HTTPException(status_code=400, detail=f"Invalid details JSON: {e}") from e
    if not isinstance(data, dict):
        raise HTTPException(status_code=400, detail="Details must be a JSON object")
    return get_brand_store().apply_defaults(ProductDetails.from_dict(data))


def _parse_asset_type(value: str) -> AssetType:
    try:
        return AssetType.parse(value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post(
    "/api/assets/generate",
    response_model=BatchResultResponse,
    summary="Generate assets",
    description="Generate every selected asset type concurrently. Failed types are reported alongside the successes.",
    responses={
        400: {"description": "No images, no asset types or invalid details"},
        404: {"description": "Item not found"},
        503: {"description": "Generation backend not configured"},
    },
)
async def generate_assets(
    files: list[UploadFile] | None = File(None),
    asset_types: list[str] | None = Form(None),
    details: str = Form("{}"),
    item_id: str | None = Form(None),
) -> dict:
    """Run one generation batch, optionally saving the successes to an item."""
    images = await _read_images(files)
    selected = [_parse_asset_type(t) for t in asset_types or []]
    product = _parse_details(details)

    item_store = None
    if item_id:
        item_store = await get_item_store()
        try:
            await item_store.get_item(item_id)
        except ItemNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e

    orchestrator = get_orchestrator()
    try:
        selected = orchestrator.validate_batch(images, selected)
        logo = await get_brand_store().get_effective_logo()
        result = await orchestrator.generate_batch(images, selected, product, logo=logo)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except GenerationServiceError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    if item_store is not None and result.succeeded:
        await item_store.save_assets(item_id, result.succeeded)

    return result.to_dict()


@router.post(
    "/api/assets/regenerate",
    response_model=BatchResultResponse,
    summary="Regenerate one asset",
    description="Regenerate a single asset type and return the displayed asset list with only that entry replaced.",
    responses={
        400: {"description": "No images, unknown asset type or invalid JSON"},
        503: {"description": "Generation backend not configured"},
    },
)
async def regenerate_asset(
    files: list[UploadFile] | None = File(None),
    asset_type: str = Form(...),
    details: str = Form("{}"),
    assets: str = Form("[]"),
) -> dict:
    """Regenerate one asset type within the currently displayed results."""
    images = await _read_images(files)
    target = _parse_asset_type(asset_type)
    product = _parse_details(details)

    try:
        current = [GeneratedAsset.from_dict(a) for a in json.loads(assets or "[]")]
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid assets JSON: {e}") from e

    orchestrator = get_orchestrator()
    try:
        orchestrator.validate_batch(images, [target])
        logo = await get_brand_store().get_effective_logo()
        result = await orchestrator.regenerate(current, target, images, product, logo=logo)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except GenerationServiceError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    return result.to_dict()


@router.post(
    "/api/assets/prompt",
    response_model=PromptPreviewResponse,
    summary="Preview a prompt",
    description="Render the prompt an asset type would be generated with. No backend call is made.",
    responses={400: {"description": "Unknown asset type"}},
)
async def preview_prompt(request: PromptPreviewRequest) -> dict:
    """Render the prompt for one asset type."""
    asset_type = _parse_asset_type(request.asset_type)
    product = get_brand_store().apply_defaults(ProductDetails.from_dict(request.details))
    return {
        "asset_type": asset_type.value,
        "template_key": select_template_key(asset_type, product.type).value,
        "prompt": get_orchestrator().build_prompt(asset_type, product),
    }


@router.post(
    "/api/detect-type",
    response_model=DetectTypeResponse,
    summary="Detect jewelry type",
    description="Classify the jewelry in an uploaded photo. On failure the given fallback type is returned.",
    responses={
        400: {"description": "Empty upload"},
        503: {"description": "Detection failed and no fallback type was given"},
    },
)
async def detect_type(
    file: UploadFile = File(...),
    fallback_type: str | None = Form(None),
) -> dict:
    """Detect the jewelry type of one photo."""
    images = await _read_images([file])
    if not images:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")

    try:
        detected = await get_generation_service().detect_jewelry_type(images[0])
    except GenerationServiceError as e:
        if not fallback_type:
            raise HTTPException(status_code=503, detail=str(e)) from e
        logger.warning(f"Type detection failed, keeping {fallback_type}: {e}")
        return {"type": JewelryType.parse(fallback_type).value, "detected": False, "error": str(e)}

    return {"type": detected.value, "detected": True, "error": None}
