"""
FastAPI Endpoints
=================

HTTP access to the Positronic Database Client.

Endpoints:
- GET /: Welcome page
- GET /api/v1/health: Health check endpoint
- POST /api/v1/connections/test: Log a connection test request
- POST /api/v1/queries/execute: Log a query execution request
"""
