"""Read-only access to the prompts shipped with the service."""

from flask import Blueprint, jsonify

from uigen_backend.config import (
    ENTRYPOINT_FILENAME,
    IMPORT_ALIAS,
    get_generation_prompt,
)

bp = Blueprint("prompts", __name__, url_prefix="/api/prompts")


@bp.get("/generation")
def get_generation_prompt_text():
    return jsonify(
        prompt=get_generation_prompt(),
        entrypoint=ENTRYPOINT_FILENAME,
        importAlias=IMPORT_ALIAS,
    )
