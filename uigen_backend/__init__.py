import logging
import os

from flask import Flask, jsonify

from uigen_backend.api import init_app as init_api
from uigen_backend.config import DEFAULT_LLM_MODEL, GENERATION_PROMPT
from uigen_backend.services.llm import (
    GenerationLLMSettings,
    init_generation_llm_client,
)


def create_app() -> Flask:
    """Application factory for the UI generation backend."""
    app = Flask(__name__)

    _configure_logging(app)

    @app.get("/healthz")
    def healthcheck():
        return jsonify(status="ok")

    @app.get("/api/healthz")
    def api_healthcheck():
        return jsonify(status="ok")

    llm_api_key = os.environ.get("UIGEN_LLM_API_KEY") or os.environ.get(
        "OPENAI_API_KEY"
    )
    llm_model = os.environ.get("UIGEN_LLM_MODEL") or DEFAULT_LLM_MODEL

    if llm_api_key:
        app.extensions["generation_llm_client"] = init_generation_llm_client(
            GenerationLLMSettings(
                api_key=llm_api_key,
                model=llm_model,
                system_prompt=GENERATION_PROMPT,
            )
        )
        app.logger.info("generation LLM enabled", extra={"model": llm_model})
    else:
        app.logger.warning(
            "UIGEN_LLM_API_KEY/OPENAI_API_KEY not set; generation endpoint disabled"
        )

    init_api(app)

    return app


def _configure_logging(app: Flask) -> None:
    """Ensure application and root loggers emit INFO-level logs."""

    logging.basicConfig(level=logging.INFO)
    logging.getLogger().setLevel(logging.INFO)
    app.logger.setLevel(logging.INFO)


app = create_app()
