"""Generation Service - Gemini image and text generation for jewelry assets."""

import base64
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Optional

from google.genai import Client, errors, types

from models.assets import InputImage, OutputModality
from models.jewelry import JewelryType
from services.prompts import COPYWRITER_SYSTEM_INSTRUCTION, JEWELRY_TYPE_DETECTOR

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_MODEL = "gemini-3-pro-image-preview"
DEFAULT_TEXT_MODEL = "gemini-2.5-flash"

# Lowercased detector answers -> jewelry type
DETECTED_TYPES = {
    "necklace": JewelryType.NECKLACE,
    "earrings": JewelryType.EARRINGS,
    "ring": JewelryType.RING,
    "bracelet": JewelryType.BRACELET,
    "other": JewelryType.OTHER,
}


class GenerationServiceError(Exception):
    """Error from the generation backend; the message is shown to the user."""

    pass


class EmptyContentError(GenerationServiceError):
    """Backend answered without a usable image or text payload."""

    pass


@dataclass
class GenerationRequest:
    """One request to the generation backend."""

    prompt: str
    modality: OutputModality
    images: list[InputImage] = field(default_factory=list)


@dataclass
class GenerationResponse:
    """Backend payload: image bytes for image requests, text otherwise."""

    image_bytes: Optional[bytes] = None
    mime_type: Optional[str] = None
    text: Optional[str] = None
    generation_time_ms: int = 0

    def to_content(self) -> str:
        """Image as a data URL, or the text."""
        if self.image_bytes is not None:
            encoded = base64.b64encode(self.image_bytes).decode("ascii")
            return f"data:{self.mime_type or 'image/png'};base64,{encoded}"
        return self.text or ""


class GenerationService:
    """Gemini client wrapper for asset generation and jewelry type detection."""

    def __init__(
        self,
        api_key: str = "",
        image_model: str = DEFAULT_IMAGE_MODEL,
        text_model: str = DEFAULT_TEXT_MODEL,
        client: Optional[Client] = None,
    ):
        """Initialize the generation service.

        Args:
            api_key: Gemini API key
            image_model: Model used for image outputs
            text_model: Model used for text outputs and type detection
            client: Pre-built google-genai client (created lazily otherwise)
        """
        self.api_key = api_key
        self.image_model = image_model
        self.text_model = text_model
        self._client = client

    def is_configured(self) -> bool:
        """Check if an API key (or an injected client) is available."""
        return bool(self.api_key) or self._client is not None

    @property
    def client(self) -> Client:
        if self._client is None:
            if not self.api_key:
                raise GenerationServiceError(
                    "API Key is missing. Please check your environment variables."
                )
            self._client = Client(api_key=self.api_key)
            logger.info(
                f"Initialized Gemini client (image={self.image_model}, text={self.text_model})"
            )
        return self._client

    @staticmethod
    def _image_parts(images: list[InputImage]) -> list[types.Part]:
        return [types.Part.from_bytes(data=img.data, mime_type=img.mime_type) for img in images]

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        """Generate one image or text asset.

        Args:
            request: Prompt, input images and output modality

        Returns:
            GenerationResponse carrying the payload

        Raises:
            GenerationServiceError: On backend failure or refusal
            EmptyContentError: When the backend returns no payload
        """
        is_image = request.modality is OutputModality.IMAGE
        model = self.image_model if is_image else self.text_model
        config = None
        if not is_image:
            config = types.GenerateContentConfig(system_instruction=COPYWRITER_SYSTEM_INSTRUCTION)

        contents: list[Any] = [*self._image_parts(request.images), request.prompt]

        logger.info(
            f"Generating {request.modality.value} with {model} ({len(request.images)} input image(s))"
        )
        start_time = time.time()

        try:
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=config,
            )
        except errors.APIError as e:
            raise GenerationServiceError(e.message or str(e)) from e

        generation_time_ms = int((time.time() - start_time) * 1000)

        if is_image:
            result = self._extract_image(response)
        else:
            text = (response.text or "").strip()
            if not text:
                raise EmptyContentError("No text generated.")
            result = GenerationResponse(text=text)

        result.generation_time_ms = generation_time_ms
        logger.info(f"Gemini returned {request.modality.value} in {generation_time_ms}ms")
        return result

    @staticmethod
    def _extract_image(response: Any) -> GenerationResponse:
        candidates = response.candidates or []
        if candidates and candidates[0].content and candidates[0].content.parts:
            for part in candidates[0].content.parts:
                inline_data = part.inline_data
                if inline_data is not None and inline_data.data:
                    return GenerationResponse(
                        image_bytes=inline_data.data,
                        mime_type=inline_data.mime_type or "image/png",
                    )

        # The model refused or answered in prose instead of drawing
        refusal = response.text
        if refusal:
            raise GenerationServiceError(f"Generation failed: {refusal}")
        raise EmptyContentError("No content generated.")

    async def detect_jewelry_type(self, image: InputImage) -> JewelryType:
        """Classify the jewelry in one photo.

        Args:
            image: Product photo

        Returns:
            Detected jewelry type; unrecognised answers map to OTHER

        Raises:
            GenerationServiceError: If the backend call fails
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.text_model,
                contents=[*self._image_parts([image]), JEWELRY_TYPE_DETECTOR],
            )
        except errors.APIError as e:
            raise GenerationServiceError(e.message or str(e)) from e

        answer = (response.text or "").strip().lower().rstrip(".")
        detected = DETECTED_TYPES.get(answer, JewelryType.OTHER)
        logger.info(f"Detected jewelry type: {detected.value} (raw answer: {answer!r})")
        return detected
