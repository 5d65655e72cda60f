"""Jewelry item catalog routes for the Atelier API."""

from api.dependencies import get_item_store
from api.schemas import (
    ItemAssetListResponse,
    ItemCreateRequest,
    ItemListResponse,
    ItemResponse,
    ItemUpdateRequest,
    MessageResponse,
)
from fastapi import APIRouter, HTTPException
from models.jewelry import ProductDetails
from services.item_store import ItemNotFoundError

router = APIRouter(tags=["Items"])


@router.get("/api/items", response_model=ItemListResponse, summary="List items")
async def list_items(limit: int = 100) -> dict:
    """List cataloged items, newest first."""
    store = await get_item_store()
    items = await store.list_items(limit=limit)
    return {"items": [item.to_dict() for item in items]}


@router.post("/api/items", response_model=ItemResponse, status_code=201, summary="Create an item")
async def create_item(request: ItemCreateRequest) -> dict:
    """Catalog a new item."""
    details = ProductDetails.from_dict(request.details)
    if not details.name:
        details.name = request.name
    store = await get_item_store()
    item = await store.create_item(
        name=request.name,
        details=details,
        description=request.description,
        images=request.images,
    )
    return item.to_dict()


@router.get(
    "/api/items/{item_id}",
    response_model=ItemResponse,
    summary="Get an item",
    responses={404: {"description": "Item not found"}},
)
async def get_item(item_id: str) -> dict:
    """Get one item."""
    store = await get_item_store()
    try:
        item = await store.get_item(item_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return item.to_dict()


@router.put(
    "/api/items/{item_id}",
    response_model=ItemResponse,
    summary="Update an item",
    responses={404: {"description": "Item not found"}},
)
async def update_item(item_id: str, request: ItemUpdateRequest) -> dict:
    """Update the given fields of an item."""
    store = await get_item_store()
    details = ProductDetails.from_dict(request.details) if request.details is not None else None
    try:
        item = await store.update_item(
            item_id,
            name=request.name,
            details=details,
            description=request.description,
            images=request.images,
        )
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return item.to_dict()


@router.delete(
    "/api/items/{item_id}",
    response_model=MessageResponse,
    summary="Delete an item",
    responses={404: {"description": "Item not found"}},
)
async def delete_item(item_id: str) -> dict[str, str]:
    """Delete an item with its saved assets."""
    store = await get_item_store()
    try:
        await store.delete_item(item_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return {"message": f"Item {item_id} deleted"}


@router.get(
    "/api/items/{item_id}/assets",
    response_model=ItemAssetListResponse,
    summary="List an item's saved assets",
    responses={404: {"description": "Item not found"}},
)
async def list_item_assets(item_id: str) -> dict:
    """Saved generated assets of one item, newest first."""
    store = await get_item_store()
    try:
        assets = await store.list_assets(item_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return {"assets": assets}
