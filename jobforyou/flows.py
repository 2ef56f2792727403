"""Resume, cover-letter and job-post moderation flows.

Each flow builds a prompt, asks the provider chain for text and parses a
JSON object out of it. The document flows fall back to a deterministic
template when that fails; moderation has no safe default, so it raises.
"""
import logging

from jobforyou.ai.errors import AllProvidersFailedError
from jobforyou.parsing import (
    InvalidResponseError,
    extract_json_object,
    validate_latex_output,
    validate_moderation_output,
)
from jobforyou.prompts import cover_letter_prompt, moderation_prompt, resume_prompt
from jobforyou.templates import render_cover_letter, render_resume

logger = logging.getLogger(__name__)

VALIDATION_RETRY_MESSAGE = "We couldn't verify this job post right now. Please try again."


class GenerationFailedError(Exception):
    """A flow without a template fallback could not produce a result."""

    def __init__(self, message, user_message=VALIDATION_RETRY_MESSAGE):
        super().__init__(message)
        self.user_message = user_message


async def _generate_latex(fallback, prompt, kind):
    text = await fallback.generate(prompt)
    result = validate_latex_output(extract_json_object(text))
    logger.info("📝 AI %s generated (%d chars)", kind, len(result["latexCode"]))
    return result


async def tailor_resume(fallback, profile, job_description):
    try:
        return await _generate_latex(fallback, resume_prompt(profile, job_description), "resume")
    except (AllProvidersFailedError, InvalidResponseError) as exc:
        logger.warning("⚠️ Resume generation failed, using template: %s", exc)
        return {"latexCode": render_resume(profile)}


async def generate_cover_letter(fallback, profile, job_description):
    try:
        return await _generate_latex(fallback, cover_letter_prompt(profile, job_description), "cover letter")
    except (AllProvidersFailedError, InvalidResponseError) as exc:
        logger.warning("⚠️ Cover letter generation failed, using template: %s", exc)
        return {"latexCode": render_cover_letter(profile)}


async def validate_job_description(fallback, job_description, apply_link="", apply_email=""):
    prompt = moderation_prompt(job_description, apply_link, apply_email)
    try:
        text = await fallback.generate(prompt)
        result = validate_moderation_output(extract_json_object(text))
    except (AllProvidersFailedError, InvalidResponseError) as exc:
        logger.error("❌ Job post validation failed: %s", exc)
        raise GenerationFailedError(f"Job post validation failed: {exc}") from exc
    logger.info("🛡️ Job post moderation decision: %s", result["decision"])
    return result
