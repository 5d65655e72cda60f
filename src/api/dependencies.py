"""Service singletons and dependency injection for the Atelier API."""

from services.asset_orchestrator import AssetOrchestrator
from services.brand_settings import BrandSettingsStore
from services.generation_service import GenerationService
from services.item_store import ItemStore
from services.template_store import JsonFileTemplateStorage, TemplateStore
from utils.config import load_config

# Service singletons
_generation_service: GenerationService | None = None
_template_store: TemplateStore | None = None
_orchestrator: AssetOrchestrator | None = None
_brand_store: BrandSettingsStore | None = None
_item_store: ItemStore | None = None


def get_generation_service() -> GenerationService:
    """Get or create the Gemini generation service instance."""
    global _generation_service
    if _generation_service is None:
        config = load_config()
        _generation_service = GenerationService(
            api_key=config.get("gemini_api_key") or "",
            image_model=config["gemini_image_model"],
            text_model=config["gemini_text_model"],
        )
    return _generation_service


def get_template_store() -> TemplateStore:
    """Get or create the prompt template store, loading saved overrides."""
    global _template_store
    if _template_store is None:
        config = load_config()
        _template_store = TemplateStore(JsonFileTemplateStorage(config["templates_file"])).load()
    return _template_store


def get_orchestrator() -> AssetOrchestrator:
    """Get or create the asset orchestrator instance."""
    global _orchestrator
    if _orchestrator is None:
        config = load_config()
        _orchestrator = AssetOrchestrator(
            generation_service=get_generation_service(),
            template_store=get_template_store(),
            max_concurrent=config["max_concurrent_generations"],
        )
    return _orchestrator


def get_brand_store() -> BrandSettingsStore:
    """Get or create the brand settings store."""
    global _brand_store
    if _brand_store is None:
        config = load_config()
        _brand_store = BrandSettingsStore(
            settings_file=config["brand_settings_file"],
            default_logo=config.get("default_logo"),
        )
    return _brand_store


async def get_item_store() -> ItemStore:
    """Get or create the item catalog, connecting it on first use."""
    global _item_store
    if _item_store is None:
        config = load_config()
        _item_store = ItemStore(config["items_db_path"])
    if _item_store.db is None:
        await _item_store.connect()
    return _item_store


async def close_item_store() -> None:
    """Close the item catalog connection (application shutdown)."""
    global _item_store
    if _item_store is not None:
        await _item_store.close()
        _item_store = None
