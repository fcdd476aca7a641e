"""
Resume analysis / job matching Pydantic schemas.

The response models document the JSON shape Gemini is asked to return.
They are used for OpenAPI only: bodies are relayed without validation.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ResumeTextRequest(BaseModel):
    resumeText: Optional[str] = Field(None, example="Jane Doe, Software Engineer, 5 years React experience")


class MatchJobsRequest(BaseModel):
    userProfile: Optional[Any] = Field(None, description="Analysis previously returned by /api/analyze-resume")
    userAnswers: Optional[List[Any]] = Field(None, description="Answers in the same order as the questions")


class CandidateAnalysis(BaseModel):
    name: str
    currentRole: str
    careerLevel: str
    skills: List[str]
    experience: str
    education: str


class ResumeAnalysisResponse(BaseModel):
    analysis: CandidateAnalysis
    questions: List[str] = Field(..., min_length=5, max_length=5)


class CareerAnalysis(BaseModel):
    summary: str
    strengths: List[str]
    careerDirection: str


class JobMatch(BaseModel):
    title: str
    company: str
    matchScore: int
    location: str
    salaryRange: str
    whyGoodFit: str
    requiredSkills: List[str]
    skillGaps: List[str]


class JobMatchResponse(BaseModel):
    careerAnalysis: CareerAnalysis
    jobMatches: List[JobMatch] = Field(..., min_length=5, max_length=8)
    nextSteps: List[str]


class HealthResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
    details: Optional[str] = None


__all__ = [
    "ResumeTextRequest",
    "MatchJobsRequest",
    "CandidateAnalysis",
    "ResumeAnalysisResponse",
    "CareerAnalysis",
    "JobMatch",
    "JobMatchResponse",
    "HealthResponse",
    "ErrorResponse",
]
