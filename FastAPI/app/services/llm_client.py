import json
import logging
import re
from typing import Any

import boto3
from botocore.config import Config
from pydantic import ValidationError

from app.config import settings
from app.core.errors import ExternalServiceDegraded
from app.schemas.analysis import MatchAnalysis, ResumeAnalysis

logger = logging.getLogger(__name__)

# Bedrock accepts long prompts, but resumes past this are mostly noise.
MAX_RESUME_CHARS = 20000


def _call_bedrock_llm(prompt: str, timeout: float | None = None) -> str:
    """Call Bedrock LLM via converse API and return response text."""
    timeout = timeout or settings.bedrock_llm_timeout_seconds
    try:
        client = boto3.client(
            "bedrock-runtime",
            region_name=settings.aws_region,
            config=Config(read_timeout=int(timeout), connect_timeout=10, retries={"max_attempts": 1}),
        )
        model_ids = [settings.bedrock_llm_model_id]
        # Common typo safety: "ministral" -> "mistral".
        if "ministral" in settings.bedrock_llm_model_id:
            model_ids.append(settings.bedrock_llm_model_id.replace("ministral", "mistral"))

        last_err = None
        response = None
        for model_id in model_ids:
            try:
                response = client.converse(
                    modelId=model_id,
                    messages=[
                        {
                            "role": "user",
                            "content": [{"text": prompt}],
                        }
                    ],
                    inferenceConfig={
                        "maxTokens": 1200,
                        "temperature": 0.2,
                    },
                )
                break
            except Exception as e:
                last_err = e
                logger.warning("Bedrock LLM model attempt failed: model=%s err=%s", model_id, e)
        if response is None and last_err is not None:
            raise last_err

        blocks = (response.get("output") or {}).get("message", {}).get("content", [])
        text = "".join(b.get("text", "") for b in blocks if isinstance(b, dict)).strip()
        logger.debug("Bedrock LLM response length=%d", len(text))
        return text
    except Exception as e:
        logger.warning("Bedrock LLM call failed: %s", e)
        raise


def is_llm_enabled() -> bool:
    """Whether Bedrock LLM is enabled."""
    return bool(settings.bedrock_llm_enabled and settings.bedrock_llm_model_id and settings.aws_region)


def _extract_json(text: str) -> dict[str, Any]:
    """Parse a JSON object from a model reply, tolerating markdown fences and prose around it."""
    clean = re.sub(r"^```(?:json)?\s*", "", text or "", flags=re.IGNORECASE).strip()
    clean = re.sub(r"\s*```$", "", clean).strip()
    try:
        obj = json.loads(clean)
    except json.JSONDecodeError:
        m = re.search(r"\{[\s\S]*\}", clean)
        if not m:
            raise
        obj = json.loads(m.group(0))
    if not isinstance(obj, dict):
        raise ValueError("LLM reply is not a JSON object")
    return obj


def _ask_json(prompt: str, purpose: str) -> dict[str, Any]:
    if not is_llm_enabled():
        raise ExternalServiceDegraded(f"LLM disabled; skipping {purpose}")
    try:
        text = _call_bedrock_llm(prompt)
    except Exception as e:
        raise ExternalServiceDegraded(f"{purpose} call failed: {e}") from e
    try:
        return _extract_json(text)
    except (json.JSONDecodeError, ValueError) as e:
        logger.warning("Failed to parse %s response: %s", purpose, e)
        raise ExternalServiceDegraded(f"{purpose} returned unparseable output") from e


def analyze_resume(resume_text: str) -> ResumeAnalysis:
    """
    Extract skills, experience, education and a short summary from resume text.
    Raises ExternalServiceDegraded on any transport, timeout or parse failure.
    """
    prompt = f"""You are an expert resume analyzer for recruitment.
Analyze the resume text and extract structured information.
Respond with ONLY a JSON object in this exact format:
{{
  "skills": ["skill1", "skill2", ...],
  "experience": "summary of years and roles",
  "education": "highest education level and field",
  "summary": "brief professional summary"
}}

RESUME:
<<<{(resume_text or "")[:MAX_RESUME_CHARS]}>>>"""

    obj = _ask_json(prompt, "resume analysis")
    try:
        analysis = ResumeAnalysis.model_validate(obj)
    except ValidationError as e:
        raise ExternalServiceDegraded("resume analysis returned an unexpected shape") from e
    analysis.skills = [s.strip() for s in analysis.skills if s and s.strip()]
    logger.info("Resume analysis extracted %d skills", len(analysis.skills))
    return analysis


def match_candidate_to_job(
    candidate_skills: list[str],
    candidate_experience: str,
    job_requirements: list[str],
    job_description: str,
) -> MatchAnalysis:
    """
    Score candidate vs job on a 0-100 scale with matched/missing skills and reasoning.
    The score is returned as the model produced it; callers round and bound it.
    """
    prompt = f"""You are an expert recruitment AI that matches candidates to jobs.
Analyze how well the candidate matches the job requirements.
Provide a match score from 0-100 and detailed analysis.
Respond with ONLY a JSON object in this exact format:
{{
  "score": number (0-100),
  "matched_skills": ["requirement", ...],
  "missing_skills": ["requirement", ...],
  "reasoning": "detailed explanation of the match"
}}
matched_skills and missing_skills must be taken from the job requirements list.

Candidate Skills: {", ".join(candidate_skills or [])}
Candidate Experience: {candidate_experience or "unknown"}

Job Requirements: {", ".join(job_requirements or [])}
Job Description: {job_description or ""}"""

    obj = _ask_json(prompt, "match scoring")
    # Accept camelCase keys some models insist on returning.
    for camel, snake in (("matchedSkills", "matched_skills"), ("missingSkills", "missing_skills")):
        if camel in obj and snake not in obj:
            obj[snake] = obj.pop(camel)
    try:
        return MatchAnalysis.model_validate(obj)
    except ValidationError as e:
        raise ExternalServiceDegraded("match scoring returned an unexpected shape") from e
