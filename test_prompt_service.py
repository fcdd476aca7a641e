from app.services.career_service import parse_completion
from app.services.prompt_service import (
    FIRST_QUESTION,
    build_job_match_prompt,
    build_resume_analysis_prompt,
    format_answers,
)


def test_resume_prompt_embeds_text_verbatim():
    resume = "Jane Doe\n  Senior Engineer {not a placeholder}"
    prompt = build_resume_analysis_prompt(resume)
    assert resume in prompt
    assert '"careerLevel"' in prompt
    assert '"questions"' in prompt
    assert FIRST_QUESTION in prompt


def test_answers_keep_their_order():
    assert format_answers(["Pivot to data", "Remote", "Startup"]) == (
        "Q1: Pivot to data\nQ2: Remote\nQ3: Startup"
    )


def test_job_match_prompt_contains_profile_and_answers():
    prompt = build_job_match_prompt({"name": "Jane Doe", "skills": ["React"]}, ["Continue", "Hybrid"])
    assert '"name": "Jane Doe"' in prompt
    assert "Q1: Continue\nQ2: Hybrid" in prompt
    assert '"jobMatches"' in prompt
    assert '"nextSteps"' in prompt
    assert "between 5 and 8 jobs" in prompt


def test_parse_completion_accepts_any_json():
    value, error = parse_completion('{"analysis": {"name": "Jane"}, "questions": []}')
    assert error is None
    assert value["analysis"]["name"] == "Jane"


def test_parse_completion_keeps_raw_text_on_failure():
    value, error = parse_completion("Sorry, I can't help")
    assert value is None
    assert error.raw_text == "Sorry, I can't help"
    assert error.to_response() == {"error": "Failed to parse AI response", "details": "Sorry, I can't help"}


def test_parse_completion_refuses_non_finite_numbers():
    for text in ('{"score": NaN}', '[Infinity]', '{"score": -Infinity}'):
        value, error = parse_completion(text)
        assert value is None
        assert error.raw_text == text
