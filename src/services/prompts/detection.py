"""Jewelry type detection prompt and copywriting system instruction."""

# Jewelry Type Detector prompt (no placeholders); the answer is a single word
JEWELRY_TYPE_DETECTOR = """Look at this jewelry image and identify what type of jewelry it is.

Respond with ONLY ONE of these exact words:
- Necklace
- Earrings
- Ring
- Bracelet
- Other

Just the single word, nothing else."""


# System instruction sent with text (copywriting) requests only
COPYWRITER_SYSTEM_INSTRUCTION = (
    "You are an expert jewelry product photographer and copywriter. "
    "You specialize in high-end, luxurious aesthetics."
)
