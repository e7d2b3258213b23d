import pytest

import app.services.llm_client as llm
from app.core.errors import ExternalServiceDegraded


@pytest.fixture
def llm_on(monkeypatch):
    monkeypatch.setattr(llm.settings, "bedrock_llm_enabled", True)
    monkeypatch.setattr(llm.settings, "bedrock_llm_model_id", "mistral.x")
    monkeypatch.setattr(llm.settings, "aws_region", "us-west-2")


def test_call_bedrock_llm_tries_typo_fallback_model(monkeypatch):
    class _Client:
        def __init__(self):
            self.calls = 0

        def converse(self, modelId, messages, inferenceConfig):
            self.calls += 1
            if "ministral" in modelId:
                raise RuntimeError("bad model id")
            return {"output": {"message": {"content": [{"text": "ok-response"}]}}}

    fake = _Client()
    monkeypatch.setattr(llm, "boto3", type("B", (), {"client": lambda *args, **kwargs: fake}))
    monkeypatch.setattr(llm.settings, "bedrock_llm_model_id", "mistral.ministral-3-8b-instruct")
    monkeypatch.setattr(llm.settings, "aws_region", "us-west-2")
    out = llm._call_bedrock_llm("prompt")
    assert out == "ok-response"
    assert fake.calls == 2


def test_call_bedrock_llm_raises_when_all_models_fail(monkeypatch):
    class _Client:
        def converse(self, modelId, messages, inferenceConfig):
            raise RuntimeError("always fail")

    monkeypatch.setattr(llm, "boto3", type("B", (), {"client": lambda *args, **kwargs: _Client()}))
    monkeypatch.setattr(llm.settings, "bedrock_llm_model_id", "mistral.ministral-3-8b-instruct")
    monkeypatch.setattr(llm.settings, "aws_region", "us-west-2")
    with pytest.raises(RuntimeError):
        llm._call_bedrock_llm("prompt")


def test_is_llm_enabled(monkeypatch, llm_on):
    assert llm.is_llm_enabled() is True
    monkeypatch.setattr(llm.settings, "bedrock_llm_enabled", False)
    assert llm.is_llm_enabled() is False


def test_disabled_llm_degrades_without_calling_bedrock(monkeypatch):
    monkeypatch.setattr(llm.settings, "bedrock_llm_enabled", False)
    monkeypatch.setattr(llm, "_call_bedrock_llm", lambda prompt: pytest.fail("should not call Bedrock"))
    with pytest.raises(ExternalServiceDegraded):
        llm.analyze_resume("text")
    with pytest.raises(ExternalServiceDegraded):
        llm.match_candidate_to_job(["Python"], "3y", ["Python"], "jd")


def test_extract_json_strips_fences_and_prose():
    assert llm._extract_json('```json\n{"a": 1}\n```') == {"a": 1}
    assert llm._extract_json('Sure! Here you go:\n{"a": 2}\nThanks') == {"a": 2}


def test_extract_json_rejects_non_object():
    with pytest.raises(ValueError):
        llm._extract_json("[1, 2, 3]")


def test_analyze_resume_parses_fenced_json(monkeypatch, llm_on):
    reply = '```json\n{"skills": ["Python", " ", "AWS "], "experience": "4 years", "education": "BSc", "summary": "Backend dev"}\n```'
    monkeypatch.setattr(llm, "_call_bedrock_llm", lambda prompt: reply)
    out = llm.analyze_resume("resume text")
    assert out.skills == ["Python", "AWS"]
    assert out.experience == "4 years"
    assert out.summary == "Backend dev"


def test_analyze_resume_truncates_long_input(monkeypatch, llm_on):
    seen = {}

    def fake(prompt):
        seen["prompt"] = prompt
        return '{"skills": []}'

    monkeypatch.setattr(llm, "_call_bedrock_llm", fake)
    llm.analyze_resume("x" * (llm.MAX_RESUME_CHARS + 500))
    assert "x" * llm.MAX_RESUME_CHARS in seen["prompt"]
    assert "x" * (llm.MAX_RESUME_CHARS + 1) not in seen["prompt"]


def test_analyze_resume_unparseable_reply_degrades(monkeypatch, llm_on):
    monkeypatch.setattr(llm, "_call_bedrock_llm", lambda prompt: "I cannot help with that")
    with pytest.raises(ExternalServiceDegraded):
        llm.analyze_resume("resume text")


def test_analyze_resume_transport_error_degrades(monkeypatch, llm_on):
    monkeypatch.setattr(llm, "_call_bedrock_llm", lambda prompt: (_ for _ in ()).throw(TimeoutError("read timeout")))
    with pytest.raises(ExternalServiceDegraded):
        llm.analyze_resume("resume text")


def test_match_accepts_camel_case_keys(monkeypatch, llm_on):
    reply = '{"score": 72.5, "matchedSkills": ["Python"], "missingSkills": ["Kubernetes"], "reasoning": "ok"}'
    monkeypatch.setattr(llm, "_call_bedrock_llm", lambda prompt: reply)
    out = llm.match_candidate_to_job(["Python"], "3 years", ["Python", "Kubernetes"], "Backend role")
    assert out.score == 72.5
    assert out.matched_skills == ["Python"]
    assert out.missing_skills == ["Kubernetes"]


def test_match_prompt_lists_requirements(monkeypatch, llm_on):
    seen = {}

    def fake(prompt):
        seen["prompt"] = prompt
        return '{"score": 10}'

    monkeypatch.setattr(llm, "_call_bedrock_llm", fake)
    llm.match_candidate_to_job([], "", ["Go", "gRPC"], "desc")
    assert "Job Requirements: Go, gRPC" in seen["prompt"]


def test_match_wrong_shape_degrades(monkeypatch, llm_on):
    monkeypatch.setattr(llm, "_call_bedrock_llm", lambda prompt: '{"score": "very good"}')
    with pytest.raises(ExternalServiceDegraded):
        llm.match_candidate_to_job(["Python"], "3 years", ["Python"], "jd")
