#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional


class JobFiltersRequest(BaseModel):
    """Optional filters applied to the active job set."""
    experience_level: Optional[str] = Field(None, description="Exact experience level, e.g. 'senior'")
    location: Optional[str] = Field(None, description="Case-insensitive substring of the job location")
    job_category: Optional[str] = Field(None, description="Exact job category")


class ComputeMatchesRequest(BaseModel):
    """Request to rank active jobs for a candidate."""
    candidate_id: str = Field(..., min_length=1, description="Candidate profile id")
    job_id: Optional[str] = Field(None, description="Restrict matching to this job")
    limit: Optional[int] = Field(None, ge=1, le=500, description="Maximum matches to return (1-500)")
    filters: Optional[JobFiltersRequest] = None


class RankCandidatesRequest(BaseModel):
    """Request to rank candidates for one of the employer's jobs."""
    limit: Optional[int] = Field(None, ge=1, le=500, description="Maximum candidates to return (1-500)")
    min_score: Optional[int] = Field(None, ge=0, le=100, description="Minimum match score (0-100)")
