"""
Data Models
===========

Pydantic models for the welcome page, health checks and API error responses.
"""
