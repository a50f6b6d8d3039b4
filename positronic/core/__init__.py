"""
Core Business Logic
==================

Core modules for the Positronic Database Client.

Modules:
- rendering: Jinja2 rendering of the welcome page
"""
