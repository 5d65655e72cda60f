"""Prompt template settings routes for the Atelier API."""

from api.dependencies import get_template_store
from api.schemas import MessageResponse, TemplateListResponse, TemplateResponse, TemplateUpdateRequest
from fastapi import APIRouter, HTTPException
from services.template_store import TemplateNotFoundError

router = APIRouter(tags=["Templates"])


@router.get(
    "/api/templates",
    response_model=TemplateListResponse,
    summary="List prompt templates",
    description="Returns every prompt template and whether it differs from the factory default.",
)
async def list_templates() -> dict:
    """List all prompt templates."""
    store = get_template_store()
    return {
        "templates": [
            {"key": key.value, "content": content, "customized": store.is_customized(key)}
            for key, content in store.templates.items()
        ]
    }


@router.put(
    "/api/templates/{key}",
    response_model=TemplateResponse,
    summary="Edit a prompt template",
    responses={404: {"description": "Unknown template key"}},
)
async def update_template(key: str, request: TemplateUpdateRequest) -> dict:
    """Replace one template and persist the change."""
    store = get_template_store()
    try:
        store.update(key, request.content)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Template not found: {key}") from e
    template_key = next(k for k in store.templates if k.value == key)
    return {"key": key, "content": request.content, "customized": store.is_customized(template_key)}


@router.post(
    "/api/templates/reset",
    response_model=MessageResponse,
    summary="Reset prompt templates",
    description="Restores every template to its factory default.",
)
async def reset_templates() -> dict[str, str]:
    """Reset all templates to the defaults."""
    get_template_store().reset()
    return {"message": "Templates reset to defaults"}
