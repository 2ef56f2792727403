"""Tests for the resume, cover letter and moderation flows."""
import json

import pytest

from jobforyou.ai.errors import AllProvidersFailedError
from jobforyou.flows import (
    VALIDATION_RETRY_MESSAGE,
    GenerationFailedError,
    generate_cover_letter,
    tailor_resume,
    validate_job_description,
)
from jobforyou.templates import render_cover_letter, render_resume

from conftest import ScriptedFallback

LATEX = "\\documentclass{article}\\begin{document}Tailored\\end{document}"
JOB = "Senior Python Engineer at Initech. You will build APIs and data pipelines."


@pytest.mark.asyncio
async def test_tailor_resume_uses_ai_latex(profile):
    fallback = ScriptedFallback(reply="```json\n" + json.dumps({"latexCode": LATEX}) + "\n```")

    result = await tailor_resume(fallback, profile, JOB)

    assert result == {"latexCode": LATEX}
    prompt = fallback.prompts[0]
    assert JOB in prompt
    assert "Ada Lovelace" in prompt
    assert '"latexCode"' in prompt


@pytest.mark.asyncio
async def test_tailor_resume_falls_back_when_providers_fail(profile):
    fallback = ScriptedFallback(error=AllProvidersFailedError("AI generation failed: no providers attempted"))

    result = await tailor_resume(fallback, profile, JOB)

    assert result == {"latexCode": render_resume(profile)}


@pytest.mark.asyncio
async def test_tailor_resume_falls_back_on_unusable_text(profile):
    fallback = ScriptedFallback(reply="I cannot help with that.")
    assert await tailor_resume(fallback, profile, JOB) == {"latexCode": render_resume(profile)}


@pytest.mark.asyncio
async def test_cover_letter_uses_ai_latex(profile):
    fallback = ScriptedFallback(reply=json.dumps({"latexCode": LATEX}))

    result = await generate_cover_letter(fallback, profile, JOB)

    assert result == {"latexCode": LATEX}
    assert "Software Engineer at Analytical Engines & Co" in fallback.prompts[0]


@pytest.mark.asyncio
async def test_cover_letter_falls_back_on_wrong_shape(profile):
    fallback = ScriptedFallback(reply='{"letter": "Dear team"}')
    assert await generate_cover_letter(fallback, profile, JOB) == {"latexCode": render_cover_letter(profile)}


@pytest.mark.asyncio
async def test_validate_job_description_returns_decision():
    fallback = ScriptedFallback(reply='{"decision": "spam", "reason": "The apply link uses a URL shortener."}')

    result = await validate_job_description(fallback, JOB, apply_link="https://bit.ly/x")

    assert result == {"decision": "spam", "reason": "The apply link uses a URL shortener."}
    assert "https://bit.ly/x" in fallback.prompts[0]


@pytest.mark.asyncio
async def test_validate_job_description_raises_without_fallback():
    fallback = ScriptedFallback(error=AllProvidersFailedError("AI generation failed after trying groq."))

    with pytest.raises(GenerationFailedError) as exc_info:
        await validate_job_description(fallback, JOB)
    assert exc_info.value.user_message == VALIDATION_RETRY_MESSAGE
    assert isinstance(exc_info.value.__cause__, AllProvidersFailedError)


@pytest.mark.asyncio
async def test_validate_job_description_rejects_bad_json():
    fallback = ScriptedFallback(reply='{"decision": "probably fine"}')

    with pytest.raises(GenerationFailedError):
        await validate_job_description(fallback, JOB)
