"""Pydantic models for redirect rules."""

from pydantic import BaseModel, ConfigDict, Field


class PathRule(BaseModel):
    """One configured redirect from a request path to a destination URL."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Exact request path to match")
    destination: str = Field(..., alias="url", description="Redirect target")
