"""Endpoint for forwarding component requests to the generation LLM."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from uigen_backend.api.deps import get_generation_client

bp = Blueprint("generate", __name__, url_prefix="/api")


@bp.post("/generate")
def generate_component():
    """Pass the user's request and the generation prompt to the LLM."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    prompt = payload.get("prompt")
    if isinstance(prompt, str):
        prompt = prompt.strip() or None
    else:
        prompt = None

    if not prompt:
        return jsonify(error="prompt is required"), 400

    try:
        client = get_generation_client()
    except RuntimeError as exc:
        return jsonify(error=str(exc)), 503

    try:
        result = client.generate(prompt=prompt)
    except Exception:
        current_app.logger.exception("generation LLM invocation failed")
        return jsonify(error="failed to query generation model"), 502

    return jsonify(raw=result.raw_text, model=result.model)
