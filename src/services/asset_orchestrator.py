"""Asset Orchestrator - renders one prompt per asset type and fans out generation."""

import asyncio
import logging
import time
import uuid
from typing import Iterable, Optional

import structlog

from models.assets import AssetFailure, AssetType, BatchResult, GeneratedAsset, InputImage
from models.jewelry import ProductDetails
from services.generation_service import (
    GenerationRequest,
    GenerationService,
    GenerationServiceError,
)
from services.prompts import derive_variables, select_template_key
from services.template_store import TemplateStore

logger = logging.getLogger(__name__)

# One slot per asset type, so a full batch is never serialized
MAX_CONCURRENT_DEFAULT = len(AssetType)


class BatchValidationError(ValueError):
    """Batch rejected before any request was issued."""

    pass


def replace_asset(assets: list[GeneratedAsset], new_asset: GeneratedAsset) -> list[GeneratedAsset]:
    """Return ``assets`` with the entry of ``new_asset.type`` swapped in.

    Other entries are kept as the same objects; a type not yet present is
    appended.
    """
    replaced = False
    updated = []
    for asset in assets:
        if asset.type is new_asset.type:
            updated.append(new_asset)
            replaced = True
        else:
            updated.append(asset)
    if not replaced:
        updated.append(new_asset)
    return updated


class AssetOrchestrator:
    """Builds prompts and dispatches per-asset-type generation requests."""

    def __init__(
        self,
        generation_service: GenerationService,
        template_store: TemplateStore,
        max_concurrent: int = MAX_CONCURRENT_DEFAULT,
    ):
        """Initialize the orchestrator.

        Args:
            generation_service: Backend used for every request
            template_store: Source of the (possibly user-edited) templates
            max_concurrent: Cap on in-flight backend calls
        """
        self.generation_service = generation_service
        self.template_store = template_store
        self.max_concurrent = max(1, max_concurrent)
        self._semaphore: Optional[asyncio.Semaphore] = None
        self._semaphore_loop: Optional[asyncio.AbstractEventLoop] = None

    def _get_semaphore(self) -> asyncio.Semaphore:
        # A semaphore binds to the loop it first waits on; keep one per running loop
        loop = asyncio.get_running_loop()
        if self._semaphore is None or self._semaphore_loop is not loop:
            self._semaphore = asyncio.Semaphore(self.max_concurrent)
            self._semaphore_loop = loop
        return self._semaphore

    def build_prompt(self, asset_type: AssetType, details: ProductDetails) -> str:
        """Select the template, derive its variables and render it."""
        template_key = select_template_key(asset_type, details.type)
        variables = derive_variables(details, template_key)
        return self.template_store.render(template_key, variables)

    def build_request(
        self,
        asset_type: AssetType,
        images: list[InputImage],
        details: ProductDetails,
        logo: Optional[InputImage] = None,
    ) -> GenerationRequest:
        """Assemble the backend request; the logo only rides along for staging."""
        request_images = list(images)
        if asset_type is AssetType.STAGING and logo is not None:
            request_images.append(logo)
        return GenerationRequest(
            prompt=self.build_prompt(asset_type, details),
            modality=asset_type.modality,
            images=request_images,
        )

    async def generate_asset(
        self,
        asset_type: AssetType,
        images: list[InputImage],
        details: ProductDetails,
        logo: Optional[InputImage] = None,
    ) -> GeneratedAsset:
        """Generate one asset.

        Raises:
            GenerationServiceError: If the backend fails or returns nothing
        """
        request = self.build_request(asset_type, images, details, logo)
        async with self._get_semaphore():
            response = await self.generation_service.generate(request)
        return GeneratedAsset(
            type=asset_type,
            content=response.to_content(),
            is_image=asset_type.is_image,
        )

    async def _settle(
        self,
        asset_type: AssetType,
        images: list[InputImage],
        details: ProductDetails,
        logo: Optional[InputImage],
    ) -> GeneratedAsset | AssetFailure:
        # Runs in its own task under gather, so the binding stays per asset type
        with structlog.contextvars.bound_contextvars(asset_type=asset_type.value):
            try:
                return await self.generate_asset(asset_type, images, details, logo)
            except GenerationServiceError as e:
                logger.warning(f"{asset_type.value} generation failed: {e}")
                return AssetFailure(asset_type=asset_type, message=str(e) or "Unknown error")
            except Exception as e:
                logger.error(f"Unexpected error generating {asset_type.value}: {e}")
                return AssetFailure(asset_type=asset_type, message=str(e) or "Unknown error")

    def validate_batch(
        self, images: list[InputImage], selected_types: Iterable[AssetType]
    ) -> list[AssetType]:
        """Check a batch can be dispatched; nothing is sent to the backend.

        Returns:
            The selected asset types, parsed and deduplicated in order

        Raises:
            BatchValidationError: No images or no asset types
            GenerationServiceError: Backend not configured
        """
        selected = list(dict.fromkeys(AssetType.parse(t) for t in selected_types))
        if not images:
            raise BatchValidationError("Please upload at least one image.")
        if not selected:
            raise BatchValidationError("Please select at least one asset type to generate.")
        if not self.generation_service.is_configured():
            raise GenerationServiceError(
                "API Key is missing. Please check your environment variables."
            )
        return selected

    async def generate_batch(
        self,
        images: list[InputImage],
        selected_types: Iterable[AssetType],
        details: ProductDetails,
        logo: Optional[InputImage] = None,
    ) -> BatchResult:
        """Generate every selected asset type concurrently.

        Each type settles on its own: failures are collected, never cancel
        siblings and are never retried. Results keep the selection order.

        Args:
            images: Product photos sent with every request
            selected_types: Asset types to generate (duplicates ignored)
            details: Product snapshot used for every prompt
            logo: Brand card logo, attached to the staging request only

        Returns:
            BatchResult with succeeded assets and per-type failures

        Raises:
            BatchValidationError: No images or no asset types
            GenerationServiceError: Backend not configured; nothing was sent
        """
        selected = self.validate_batch(images, selected_types)

        start_time = time.time()
        with structlog.contextvars.bound_contextvars(batch_id=str(uuid.uuid4())):
            logger.info(
                f"Generating {len(selected)} asset(s) for {details.type.value} "
                f"'{details.name}': {', '.join(t.value for t in selected)}"
            )

            outcomes = await asyncio.gather(
                *(self._settle(asset_type, images, details, logo) for asset_type in selected)
            )

            result = BatchResult()
            for outcome in outcomes:
                if isinstance(outcome, AssetFailure):
                    result.failed.append(outcome)
                else:
                    result.succeeded.append(outcome)

            elapsed_ms = int((time.time() - start_time) * 1000)
            logger.info(
                f"Batch finished in {elapsed_ms}ms: "
                f"{len(result.succeeded)}/{len(selected)} succeeded"
            )
            return result

    async def regenerate(
        self,
        assets: list[GeneratedAsset],
        asset_type: AssetType,
        images: list[InputImage],
        details: ProductDetails,
        logo: Optional[InputImage] = None,
    ) -> BatchResult:
        """Regenerate one asset type within an already displayed result set.

        On success only that type's entry is replaced; on failure ``assets``
        is returned untouched alongside the failure.

        Returns:
            BatchResult whose ``succeeded`` is the full updated asset list

        Raises:
            BatchValidationError: No images
            GenerationServiceError: Backend not configured
        """
        (asset_type,) = self.validate_batch(images, [asset_type])

        with structlog.contextvars.bound_contextvars(batch_id=str(uuid.uuid4())):
            outcome = await self._settle(asset_type, images, details, logo)
        if isinstance(outcome, AssetFailure):
            return BatchResult(succeeded=list(assets), failed=[outcome])

        logger.info(f"{asset_type.value} regenerated")
        return BatchResult(succeeded=replace_asset(assets, outcome))
