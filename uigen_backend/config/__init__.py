"""Static configuration shipped with the codebase."""

# Generation defaults are in a dedicated module for clarity and reuse.
from .generation import (
    DEFAULT_LLM_MODEL,
    ENTRYPOINT_FILENAME,
    GENERATION_PROMPT,
    IMPORT_ALIAS,
    get_generation_prompt,
)

__all__ = [
    "DEFAULT_LLM_MODEL",
    "ENTRYPOINT_FILENAME",
    "GENERATION_PROMPT",
    "IMPORT_ALIAS",
    "get_generation_prompt",
]
