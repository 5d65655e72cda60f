"""Template Store - editable prompt templates with reset to factory defaults.

Lifecycle: load defaults -> merge persisted overrides -> [update]* -> reset.
Persistence goes through a TemplateStorage so rendering can be tested without
touching disk.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol

from services.prompts import DEFAULT_TEMPLATES, TemplateKey, render_template

logger = logging.getLogger(__name__)


class TemplateNotFoundError(KeyError):
    """Requested template key is not in the store."""

    pass


class TemplateStorage(Protocol):
    """Persistence for template overrides, keyed by template key."""

    def load(self) -> dict[str, str]: ...

    def save(self, templates: Mapping[str, str]) -> None: ...

    def clear(self) -> None: ...


class MemoryTemplateStorage:
    """In-process storage (tests, or when persistence is not wanted)."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})

    def load(self) -> dict[str, str]:
        return dict(self.data)

    def save(self, templates: Mapping[str, str]) -> None:
        self.data = dict(templates)

    def clear(self) -> None:
        self.data = {}


class JsonFileTemplateStorage:
    """Templates persisted as one JSON object on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> dict[str, str]:
        """Load saved templates; unreadable files count as no overrides."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to parse saved prompt templates at {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring saved prompt templates at {self.path}: not a JSON object")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def save(self, templates: Mapping[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(dict(templates), indent=2), encoding="utf-8")
        logger.debug(f"Prompt templates saved to {self.path}")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class TemplateStore:
    """Process-wide prompt templates."""

    def __init__(
        self,
        storage: Optional[TemplateStorage] = None,
        defaults: Optional[Mapping[TemplateKey, str]] = None,
    ):
        """Initialize the store with factory defaults.

        Args:
            storage: Where overrides are persisted (memory when omitted)
            defaults: Factory templates (DEFAULT_TEMPLATES when omitted)
        """
        self.storage: TemplateStorage = storage if storage is not None else MemoryTemplateStorage()
        self.defaults: dict[TemplateKey, str] = dict(defaults if defaults is not None else DEFAULT_TEMPLATES)
        self._templates: dict[TemplateKey, str] = dict(self.defaults)

    def load(self) -> "TemplateStore":
        """Merge persisted overrides over the factory defaults."""
        self._templates = dict(self.defaults)
        for raw_key, content in self.storage.load().items():
            try:
                key = TemplateKey(raw_key)
            except ValueError:
                logger.warning(f"Ignoring saved template with unknown key: {raw_key}")
                continue
            self._templates[key] = content
        logger.info(f"Loaded {len(self._templates)} prompt templates")
        return self

    @property
    def templates(self) -> dict[TemplateKey, str]:
        """Snapshot of the current templates."""
        return dict(self._templates)

    def get(self, key: Any) -> str:
        """Return one template.

        Raises:
            TemplateNotFoundError: If the key is unknown or absent
        """
        try:
            template_key = TemplateKey(key)
            return self._templates[template_key]
        except (ValueError, KeyError):
            raise TemplateNotFoundError(key) from None

    def is_customized(self, key: TemplateKey) -> bool:
        return self._templates.get(key) != self.defaults.get(key)

    def update(self, key: Any, content: str) -> None:
        """Replace one template and persist the full mapping.

        Raises:
            TemplateNotFoundError: If the key is not a template key
        """
        try:
            template_key = TemplateKey(key)
        except ValueError:
            raise TemplateNotFoundError(key) from None

        self._templates[template_key] = content
        self.storage.save({k.value: v for k, v in self._templates.items()})
        logger.info(f"Updated prompt template {template_key.value}")

    def reset(self) -> None:
        """Restore factory defaults and drop persisted overrides."""
        self._templates = dict(self.defaults)
        self.storage.clear()
        logger.info("Prompt templates reset to defaults")

    def render(self, key: Any, variables: Mapping[str, Any]) -> str:
        """Render one template with the given variables."""
        return render_template(self.get(key), variables)
