"""
Pydantic Models and Schemas
===========================

Data models for the welcome page, health checks and API responses.
"""

from typing import Optional, List, Dict, Any, Literal
from datetime import datetime, timezone

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Welcome Page Models
class FeatureCard(BaseModel):
    """A feature card shown on the welcome page."""
    title: str = Field(..., min_length=1, description="Card heading")
    description: str = Field(..., min_length=1, description="Card body copy")


class WelcomePageContext(BaseModel):
    """Values passed to the welcome page template."""
    lang: str = Field(..., description="HTML lang attribute value")
    app_name: str = Field(..., description="Configured application name")
    product_name: str = Field(..., description="Product name shown in the footer")
    version: str = Field(..., description="Application version shown in the footer")
    features: List[FeatureCard] = Field(default_factory=list, description="Feature cards in display order")

    # Asset locations
    asset_url: str = Field(..., description="Base URL for bundled CSS and JS")
    alpine_cdn_url: str = Field(..., description="Alpine.js script URL")
    alpine_focus_cdn_url: str = Field(..., description="Alpine.js focus plugin script URL")


# Health Check Models
class HealthStatus(BaseModel):
    """Health check status."""
    status: Literal["healthy", "unhealthy", "degraded"] = Field(..., description="Overall status")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    version: str = Field(..., description="Application version")
    app_name: str = Field(..., description="Application name")


# Error Models
class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Error code")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")
