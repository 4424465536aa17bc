"""Shared API dependencies and helpers."""

from flask import current_app

from uigen_backend.services.llm import GenerationLLMClient


def get_generation_client() -> GenerationLLMClient:
    """Return the configured generation LLM client."""

    client: GenerationLLMClient | None = current_app.extensions.get(
        "generation_llm_client"
    )
    if client is None:
        raise RuntimeError("generation LLM client is not configured")
    return client
