"""Prompts module - templates and variable derivation for jewelry assets.

Re-exports the renderer, template keys, key selection and instruction tables:
    from services.prompts import DEFAULT_TEMPLATES, TemplateKey, render_template
    from services.prompts import derive_variables, select_template_key
"""

from services.prompts._base import find_placeholders, render_template, stringify
from services.prompts.detection import COPYWRITER_SYSTEM_INSTRUCTION, JEWELRY_TYPE_DETECTOR
from services.prompts.instructions import (
    INSTRUCTION_TABLES,
    NECKLACE_LENGTH_DESCRIPTIONS,
    InstructionTable,
    derive_variables,
    necklace_length_description,
)
from services.prompts.selection import TEMPLATE_KEY_TABLE, select_template_key
from services.prompts.templates import DEFAULT_TEMPLATES, TemplateKey

__all__ = [
    # Rendering
    "render_template",
    "find_placeholders",
    "stringify",
    # Templates
    "TemplateKey",
    "DEFAULT_TEMPLATES",
    "TEMPLATE_KEY_TABLE",
    "select_template_key",
    # Variable derivation
    "InstructionTable",
    "INSTRUCTION_TABLES",
    "NECKLACE_LENGTH_DESCRIPTIONS",
    "derive_variables",
    "necklace_length_description",
    # Detection
    "JEWELRY_TYPE_DETECTOR",
    "COPYWRITER_SYSTEM_INSTRUCTION",
]
