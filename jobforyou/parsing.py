import json
import logging
import re
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$", re.IGNORECASE)


class InvalidResponseError(ValueError):
    """Model text could not be turned into the expected JSON object."""


def extract_json_object(text):
    """Pull the outermost JSON object out of raw model text."""
    if not text:
        raise InvalidResponseError("AI returned an empty response.")
    cleaned = FENCE_PATTERN.sub("", text)
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end <= start:
        raise InvalidResponseError("AI response did not contain a JSON object.")
    try:
        parsed = json.loads(cleaned[start:end + 1])
    except json.JSONDecodeError as exc:
        logger.debug("Unparseable AI response: %r", text[:500])
        raise InvalidResponseError(f"AI returned invalid JSON: {exc.msg}") from exc
    if not isinstance(parsed, dict):
        raise InvalidResponseError("AI response JSON is not an object.")
    return parsed


class LatexOutput(BaseModel):
    latex_code: str = Field(..., alias="latexCode", min_length=1)

    @field_validator("latex_code")
    @classmethod
    def validate_document(cls, v):
        if "\\documentclass" not in v:
            raise ValueError("latexCode is not a LaTeX document")
        return v.strip()


class ModerationOutput(BaseModel):
    decision: Literal["valid", "spam", "invalid"]
    reason: str = ""

    @field_validator("decision", mode="before")
    @classmethod
    def normalise_decision(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("reason", mode="before")
    @classmethod
    def null_reason(cls, v):
        return "" if v is None else v

    @model_validator(mode="after")
    def clear_valid_reason(self):
        self.reason = "" if self.decision == "valid" else self.reason.strip()
        return self


def _validate_output(model, obj):
    try:
        return model.model_validate(obj).model_dump(by_alias=True)
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(map(str, e['loc'])) or 'response'}: {e['msg']}" for e in exc.errors())
        raise InvalidResponseError(f"AI response has the wrong shape: {problems}") from exc


def validate_latex_output(obj):
    return _validate_output(LatexOutput, obj)


def validate_moderation_output(obj):
    return _validate_output(ModerationOutput, obj)
