"""
Positronic Database Client
==========================

Application shell for the Positronic Database Client: a server-rendered
welcome page and the ``PositronicDB`` placeholder operations exposed to the
browser.

This package provides:
- Environment-based configuration and structured logging
- Jinja2 rendering of the welcome page
- FastAPI endpoints for the page, health checks and the placeholder operations
"""

__version__ = "1.0.0"
__author__ = "Positronic Team"

PRODUCT_NAME = "Positronic Database Client"
