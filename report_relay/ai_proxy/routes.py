"""
AI proxy route handlers.
Turns a text prompt or a set of images into a styled report JSON via the AI API.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, List, Callable, Tuple, Union

from flask import Blueprint, request, jsonify, Response, current_app

from report_relay.ai_proxy.prompts import build_text_system_prompt, build_image_instruction
from report_relay.ai_proxy.upstream import build_payload, call_upstream, extract_json_text

logger = logging.getLogger(__name__)

ai_proxy_bp = Blueprint("ai_proxy", __name__)

TEMPERATURE = 0.7


@dataclass(frozen=True)
class ReportKind:
    """Per-input-kind settings for the shared report pipeline."""
    name: str
    field: str
    missing_error: str
    model_key: str
    max_tokens: int
    is_valid: Callable[[Any], bool]
    build_messages: Callable[[Any], List[Dict[str, Any]]]


def _text_messages(prompt: str) -> List[Dict[str, Any]]:
    return [
        {"role": "system", "content": build_text_system_prompt()},
        {"role": "user", "content": prompt},
    ]


def _image_messages(images: List[str]) -> List[Dict[str, Any]]:
    # Every image is sent as JPEG regardless of its real format.
    content = [{"type": "text", "text": build_image_instruction()}]
    for image in images:
        content.append({
            "type": "image_url",
            "image_url": {"url": f"data:image/jpeg;base64,{image}"},
        })
    return [{"role": "user", "content": content}]


def _is_present(value: Any) -> bool:
    """Only null, false, zero and the empty string count as missing."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and (value == 0 or value != value):
        return False
    return True


TEXT_REPORT = ReportKind(
    name="text",
    field="prompt",
    missing_error="Prompt data is missing",
    model_key="AI_MODEL",
    max_tokens=8192,
    is_valid=_is_present,
    build_messages=_text_messages,
)

IMAGE_REPORT = ReportKind(
    name="image",
    field="images",
    missing_error="Image data is missing",
    model_key="AI_VISION_MODEL",
    max_tokens=4096,
    is_valid=lambda value: isinstance(value, list) and len(value) > 0,
    build_messages=_image_messages,
)


def run_report_pipeline(kind: ReportKind, load_body: Callable[[], Any], settings: Dict[str, Any]) -> Union[Response, Tuple[Response, int]]:
    """
    Parse, validate, build messages, call the AI API and return its JSON text.

    Args:
        kind (ReportKind): Text or image specifics.
        load_body (callable): Returns the parsed request body; may raise.
        settings (dict): AI_API_KEY, AI_API_URL, model ids and AI_API_TIMEOUT.

    Returns:
        200: Extracted report JSON text, verbatim.
        400: Required field missing or empty.
        500: Unreadable body, upstream or response-shape error.
    """
    try:
        data = load_body()
        if data is None:
            raise ValueError("Request body must be a JSON object, got null")
        if not isinstance(data, dict):
            data = {}

        value = data.get(kind.field)
        if not kind.is_valid(value):
            return jsonify({"error": kind.missing_error}), 400

        payload = build_payload(
            model=settings.get(kind.model_key),
            messages=kind.build_messages(value),
            max_tokens=kind.max_tokens,
            temperature=TEMPERATURE,
        )
        content = call_upstream(
            payload,
            api_key=settings.get("AI_API_KEY"),
            url=settings.get("AI_API_URL"),
            timeout=settings.get("AI_API_TIMEOUT"),
        )
        report_json = extract_json_text(content)
        return Response(report_json, status=200, mimetype="application/json")
    except Exception as e:
        logger.exception("Error generating %s report", kind.name)
        return jsonify({"error": str(e)}), 500


def _request_data() -> Any:
    # Parsed whatever the Content-Type; browsers often send JSON as text/plain.
    return request.get_json(force=True)


# --- ROUTES ---

@ai_proxy_bp.route("/ai-proxy", methods=["POST"])
def text_report():
    """
    Generate a report from a text prompt.
    Expects JSON input: {"prompt": "..."}
    """
    return run_report_pipeline(TEXT_REPORT, _request_data, current_app.config)


@ai_proxy_bp.route("/ai-image-proxy", methods=["POST"])
def image_report():
    """
    Generate a report from base64-encoded images.
    Expects JSON input: {"images": ["<base64>", ...]}
    """
    return run_report_pipeline(IMAGE_REPORT, _request_data, current_app.config)


@ai_proxy_bp.app_errorhandler(405)
def method_not_allowed(error):
    allowed = sorted(m for m in (error.valid_methods or []) if m not in ("HEAD", "OPTIONS"))
    message = f"Expected {', '.join(allowed)}" if allowed else "Method not allowed"
    headers = {"Allow": ", ".join(error.valid_methods or [])}
    return jsonify({"error": message}), 405, headers
