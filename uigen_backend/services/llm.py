"""Client helpers for sending generation requests to a text LLM."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from httpx import RequestError, TimeoutException
from openai import OpenAI
from openai.types.responses import Response

from uigen_backend.config import DEFAULT_LLM_MODEL, GENERATION_PROMPT

logger = logging.getLogger(__name__)


@dataclass
class GenerationLLMSettings:
    """Configuration required to talk to the generation model."""

    api_key: str
    model: str = DEFAULT_LLM_MODEL
    system_prompt: str = GENERATION_PROMPT


@dataclass(slots=True)
class GenerationResult:
    """Container for the raw output returned by the generation model."""

    raw_text: str
    model: str


def build_generation_input(
    request_text: str, system_prompt: str = GENERATION_PROMPT
) -> list[dict[str, Any]]:
    """Shape a component request into Responses API input messages.

    The system message always carries the generation prompt so the model
    sees the ``/App.jsx`` entrypoint and ``@/`` import conventions before
    the user's request.
    """

    return [
        {
            "role": "system",
            "content": [{"type": "input_text", "text": system_prompt}],
        },
        {
            "role": "user",
            "content": [{"type": "input_text", "text": request_text}],
        },
    ]


class GenerationLLMClient:
    """Thin wrapper around the OpenAI Responses API for UI generation."""

    def __init__(self, settings: GenerationLLMSettings, client: Any = None) -> None:
        self._settings = settings
        self._client = client or OpenAI(api_key=settings.api_key)

    @property
    def model(self) -> str:
        return self._settings.model

    def generate(self, *, prompt: str | None) -> GenerationResult:
        """Ask the model to build the requested component."""

        request_text = (prompt or "").strip()
        if not request_text:
            raise ValueError("prompt is required")

        try:
            response: Response = self._client.responses.create(
                model=self._settings.model,
                input=build_generation_input(
                    request_text, self._settings.system_prompt
                ),
            )
        except TimeoutException as e:
            logger.error("OpenAI / HTTP timeout: %r", e)
            raise
        except RequestError as e:
            logger.error("OpenAI / HTTP network error: %r", e)
            raise
        except Exception:
            logger.exception("OpenAI response error")
            raise

        logger.info(
            "generation completed",
            extra={"model": self._settings.model, "prompt_chars": len(request_text)},
        )
        return GenerationResult(
            raw_text=response.output_text or "",
            model=self._settings.model,
        )


def init_generation_llm_client(
    settings: GenerationLLMSettings,
) -> GenerationLLMClient:
    """Create a ``GenerationLLMClient`` instance from the provided settings."""

    return GenerationLLMClient(settings)
