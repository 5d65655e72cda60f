"""Brand settings: card logo and default product attributes."""

import dataclasses
import json
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import httpx

from models.assets import InputImage
from models.jewelry import ProductDetails

logger = logging.getLogger(__name__)

DEFAULT_CLASP_TYPE = "Lobster"
DEFAULT_ACCENT_DETAIL = "Signature Tag"


@dataclass
class BrandSettings:
    """Brand-wide settings applied to every generation."""

    logo_data_url: Optional[str] = None
    logo_file_name: Optional[str] = None
    use_default_logo: bool = True
    default_clasp_type: str = DEFAULT_CLASP_TYPE
    default_accent_detail: str = DEFAULT_ACCENT_DETAIL

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "BrandSettings":
        """Build from saved data; unknown keys are ignored."""
        known = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


class BrandSettingsStore:
    """JSON-persisted brand settings with the effective card logo."""

    def __init__(
        self,
        settings_file: Optional[str | Path] = None,
        default_logo: Optional[str] = None,
        timeout: float = 30.0,
    ):
        """Initialize the store.

        Args:
            settings_file: JSON file to persist to (memory only when omitted)
            default_logo: Path or http(s) URL of the default card logo
            timeout: Timeout for fetching a URL logo
        """
        self.settings_file = Path(settings_file) if settings_file else None
        self.default_logo = default_logo
        self.timeout = timeout
        self.settings = BrandSettings.from_dict(self._load_settings())
        # Successfully fetched URL logos, keyed by URL
        self._fetched_logos: dict[str, InputImage] = {}

    def _load_settings(self) -> dict:
        """Load settings from file."""
        if self.settings_file is None:
            return {}
        try:
            if self.settings_file.exists():
                data = json.loads(self.settings_file.read_text())
                if isinstance(data, dict):
                    return data
                logger.warning(f"Ignoring brand settings at {self.settings_file}: not a JSON object")
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load brand settings: {e}")
        return {}

    def _save_settings(self) -> None:
        """Persist settings to file."""
        if self.settings_file is None:
            return
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            self.settings_file.write_text(json.dumps(self.settings.to_dict()))
            logger.debug(f"Brand settings saved to {self.settings_file}")
        except OSError as e:
            logger.warning(f"Failed to save brand settings: {e}")

    def update(self, **changes) -> BrandSettings:
        """Apply partial changes and persist.

        Raises:
            ValueError: If a change names an unknown setting
        """
        unknown = set(changes) - {f.name for f in dataclasses.fields(BrandSettings)}
        if unknown:
            raise ValueError(f"Unknown brand settings: {', '.join(sorted(unknown))}")
        self.settings = dataclasses.replace(self.settings, **changes)
        self._save_settings()
        return self.settings

    def set_logo(self, image: InputImage) -> BrandSettings:
        """Store a custom card logo."""
        logger.info(f"Custom logo set: {image.filename}")
        return self.update(logo_data_url=image.to_data_url(), logo_file_name=image.filename)

    def clear_logo(self) -> BrandSettings:
        """Remove the custom logo and stop using the default one."""
        return self.update(logo_data_url=None, logo_file_name=None, use_default_logo=False)

    def reset_to_default_logo(self) -> BrandSettings:
        """Remove the custom logo and fall back to the default one."""
        return self.update(logo_data_url=None, logo_file_name=None, use_default_logo=True)

    async def get_effective_logo(self) -> Optional[InputImage]:
        """Resolve the logo sent with staging requests.

        Returns:
            The custom logo, else the default logo when enabled, else None.
            A logo that cannot be loaded is logged and treated as absent.
        """
        if self.settings.logo_data_url:
            try:
                return InputImage.from_data_url(
                    self.settings.logo_data_url,
                    filename=self.settings.logo_file_name or "logo.png",
                )
            except ValueError as e:
                logger.warning(f"Saved custom logo is unreadable: {e}")
                return None

        if self.settings.use_default_logo and self.default_logo:
            return await self._load_default_logo(self.default_logo)
        return None

    async def _load_default_logo(self, source: str) -> Optional[InputImage]:
        if source.startswith(("http://", "https://")):
            if source in self._fetched_logos:
                return self._fetched_logos[source]
            try:
                async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                    response = await client.get(source)
                    response.raise_for_status()
            except httpx.HTTPError as e:
                logger.warning(f"Failed to fetch default logo from {source}: {e}")
                return None
            mime_type = response.headers.get("content-type", "").split(";")[0].strip()
            if not mime_type:
                mime_type = mimetypes.guess_type(source)[0] or "image/jpeg"
            logo = InputImage(
                data=response.content,
                mime_type=mime_type,
                filename=source.rsplit("/", 1)[-1] or "logo.jpg",
            )
            self._fetched_logos[source] = logo
            logger.info(f"Fetched default logo from {source}")
            return logo

        try:
            return InputImage.from_path(source)
        except OSError as e:
            logger.warning(f"Failed to read default logo {source}: {e}")
            return None

    def apply_defaults(self, details: ProductDetails) -> ProductDetails:
        """Fill an empty clasp type and accent detail from the brand defaults."""
        return dataclasses.replace(
            details,
            clasp_type=details.clasp_type or self.settings.default_clasp_type,
            accent_detail=details.accent_detail or self.settings.default_accent_detail,
        )
