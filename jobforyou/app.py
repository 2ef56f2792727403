import asyncio
import logging
from threading import Lock, Thread

from flask import Flask, current_app, jsonify, request

from jobforyou.ai.manager import build_fallback
from jobforyou.config import LOG_LEVEL, PORT, require_env
from jobforyou.flows import (
    GenerationFailedError,
    generate_cover_letter,
    tailor_resume,
    validate_job_description,
)
from jobforyou.profile import parse_profile

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, LOG_LEVEL, logging.INFO),
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Provider SDK clients keep connection pools tied to one event loop, so every
# request runs its coroutine on this shared loop.
_loop = asyncio.new_event_loop()
_loop_thread = None
_lock = Lock()


def _ensure_loop():
    global _loop_thread
    with _lock:
        if _loop_thread is None or not _loop_thread.is_alive():
            _loop_thread = Thread(target=_loop.run_forever, name="ai-event-loop", daemon=True)
            _loop_thread.start()


def run_async(coro):
    _ensure_loop()
    return asyncio.run_coroutine_threadsafe(coro, _loop).result()


def get_fallback():
    with _lock:
        fallback = current_app.config.get("PROVIDER_FALLBACK")
        if fallback is None:
            fallback = build_fallback()
            current_app.config["PROVIDER_FALLBACK"] = fallback
    return fallback


def bad_request(message, details=None):
    return jsonify({"error": message, "details": details or []}), 400


def _read_document_request():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return None, None, bad_request("Request body must be a JSON object.")

    job_description = payload.get("jobDescription")
    if not isinstance(job_description, str) or not job_description.strip():
        return None, None, bad_request("jobDescription is required.")

    profile_data = payload.get("profileData")
    if profile_data is None:
        return None, None, bad_request("profileData is required.")

    profile, errors = parse_profile(profile_data)
    if errors:
        return None, None, bad_request("Profile is invalid.", errors)
    return profile, job_description, None


@app.route("/")
def health_check():
    return "JobforYou AI is alive!"


@app.route("/health")
def health_detailed():
    """Detailed health check endpoint."""
    fallback = get_fallback()
    return {
        "status": "healthy",
        "service": "jobforyou-ai",
        "providers": [provider.name for provider in fallback.providers],
        "configured": fallback.configured,
    }


@app.route("/api/tailor-resume", methods=["POST"])
def tailor_resume_endpoint():
    profile, job_description, error = _read_document_request()
    if error:
        return error
    return jsonify(run_async(tailor_resume(get_fallback(), profile, job_description)))


@app.route("/api/cover-letter", methods=["POST"])
def cover_letter_endpoint():
    profile, job_description, error = _read_document_request()
    if error:
        return error
    return jsonify(run_async(generate_cover_letter(get_fallback(), profile, job_description)))


@app.route("/api/validate-job", methods=["POST"])
def validate_job_endpoint():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return bad_request("Request body must be a JSON object.")
    job_description = payload.get("jobDescription")
    if not isinstance(job_description, str) or not job_description.strip():
        return bad_request("jobDescription is required.")

    try:
        result = run_async(
            validate_job_description(
                get_fallback(),
                job_description,
                apply_link=payload.get("applyLink") or "",
                apply_email=payload.get("applyEmail") or "",
            )
        )
    except GenerationFailedError as exc:
        return jsonify({"error": exc.user_message}), 503
    return jsonify(result)


def run():
    """Main entry point."""
    try:
        configured = require_env()
        logger.info("🔑 AI providers configured: %s", ", ".join(configured))
    except ValueError as exc:
        logger.warning("%s; documents will use templates only", exc)

    app.config["PROVIDER_FALLBACK"] = build_fallback()
    _ensure_loop()

    logger.info("🚀 JobforYou AI service starting on port %s", PORT)
    app.run(host="0.0.0.0", port=PORT, debug=False, use_reloader=False)
