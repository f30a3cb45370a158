"""
Rendering Module
===============

SVG retrieval from a PlantUML server.

Components:
- svg_renderer: request construction, retry policy and response classification
"""
