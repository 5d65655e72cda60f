"""Base utilities for prompts module.

Contains the placeholder renderer shared by every template.
"""

import logging
import re
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# {{name}} placeholders; names are letters, digits and underscores
PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")


def stringify(value: Any) -> str:
    """Text form of a template variable (None -> "", enums -> value, lists joined)."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ", ".join(stringify(v) for v in value)
    return str(value)


def find_placeholders(template: str) -> set[str]:
    """Return the placeholder names referenced by a template."""
    return set(PLACEHOLDER_PATTERN.findall(template))


def render_template(template: str, variables: Mapping[str, Any]) -> str:
    """Substitute ``{{name}}`` placeholders in a single pass.

    Supplied names are replaced by their stringified value; replacement text is
    not rescanned, so a value that itself contains ``{{other}}`` is emitted as
    is. Alphanumeric placeholders with no supplied variable are blanked and
    logged. Extra variables are ignored.

    Args:
        template: Template text with ``{{name}}`` tokens
        variables: Values keyed by placeholder name

    Returns:
        The rendered text
    """
    removed: list[str] = []

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name in variables:
            return stringify(variables[name])
        if name.isalnum():
            removed.append(name)
            return ""
        return match.group(0)

    rendered = PLACEHOLDER_PATTERN.sub(substitute, template)

    if removed:
        logger.warning(
            f"Blanked {len(removed)} unfilled placeholder(s): {', '.join(sorted(set(removed)))}"
        )

    return rendered
