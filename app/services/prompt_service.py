"""
Prompt Service

Renders the two fixed Gemini prompt templates: resume analysis and
job matching.
"""

import json
from typing import Any, Iterable

FIRST_QUESTION = (
    "Are you looking to continue in your current career path, or are you interested in "
    "pivoting to a different field or role? If pivoting, what direction interests you?"
)


def build_resume_analysis_prompt(resume_text: str) -> str:
    """Create the prompt asking for candidate attributes and 5 follow-up questions."""
    return f"""You are a career counselor analyzing a resume. Please analyze the following resume and extract key information.

Resume:
{resume_text}

Please provide your response in the following JSON format (return ONLY valid JSON, no markdown or extra text):
{{
  "analysis": {{
    "name": "Full name of the candidate (or 'Not specified' if not found)",
    "currentRole": "Current or most recent job title",
    "careerLevel": "Entry, Mid, Senior, Lead, or Executive",
    "skills": ["skill1", "skill2", "skill3", ...],
    "experience": "Brief summary of their work experience (2-3 sentences)",
    "education": "Highest degree or most relevant education"
  }},
  "questions": [
    "Question 1 - ALWAYS about career pivot/continuation",
    "Question 2 - contextual follow-up",
    "Question 3 - contextual follow-up",
    "Question 4 - contextual follow-up",
    "Question 5 - contextual follow-up"
  ]
}}

IMPORTANT: Generate exactly 5 conversational, natural questions (not robotic) to deeply understand their career goals:

1. FIRST QUESTION (always use this exact question): "{FIRST_QUESTION}"

2-5. FOLLOW-UP QUESTIONS (tailor these based on the resume):
   - If the candidate appears to be senior (10+ years experience, leadership roles, or management experience): Ask about their preference for leadership roles vs individual contributor roles
   - Ask about their location preferences (remote, hybrid, in-person, willing to relocate)
   - Ask about company type preferences (startup, established company, enterprise, nonprofit, etc.)
   - Ask about industry preferences or if they're open to switching industries
   - Ask what matters most to them (career growth, job stability, company mission, work-life balance, compensation, etc.)

Make questions 2-5 conversational and specific to their background. The goal is to match them with the RIGHT jobs, not just any jobs."""


def format_answers(answers: Iterable[Any]) -> str:
    """Number answers as Q1:, Q2:, ... keeping their order."""
    return "\n".join(f"Q{i}: {answer}" for i, answer in enumerate(answers, start=1))


def build_job_match_prompt(user_profile: Any, user_answers: Iterable[Any]) -> str:
    """Create the prompt asking for job recommendations from a profile and prior answers."""
    profile_json = json.dumps(user_profile, indent=2, ensure_ascii=False)
    answers_text = format_answers(user_answers)

    return f"""You are an expert career advisor. Based on the candidate profile and their answers to follow-up questions, recommend jobs that genuinely fit them.

Candidate Profile:
{profile_json}

Candidate Answers:
{answers_text}

Please provide your response in the following JSON format (return ONLY valid JSON, no markdown or extra text):
{{
  "careerAnalysis": {{
    "summary": "2-3 sentence summary of the candidate's situation and goals",
    "strengths": ["strength1", "strength2", "strength3"],
    "careerDirection": "Continue current path or pivot, and towards what"
  }},
  "jobMatches": [
    {{
      "title": "Job title",
      "company": "Example company or company type",
      "matchScore": 85,
      "location": "Remote, hybrid, or city",
      "salaryRange": "Estimated salary range",
      "whyGoodFit": "Why this role fits the candidate's background and answers",
      "requiredSkills": ["skill1", "skill2"],
      "skillGaps": ["gap1"]
    }}
  ],
  "nextSteps": [
    "Concrete action the candidate should take next"
  ]
}}

IMPORTANT:
- Recommend between 5 and 8 jobs in "jobMatches", ordered from best to weakest match.
- Respect the candidate's stated preferences (career pivot, location, company type, industry, priorities).
- "matchScore" is an integer from 0 to 100.
- Give 3-5 specific, actionable items in "nextSteps"."""
