"""
Page Rendering
==============

Server-side HTML rendering with Jinja2 templates.
"""
