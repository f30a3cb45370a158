"""
PlantUML SVG Renderer
=====================

Client library for rendering PlantUML diagram source to SVG through a remote
PlantUML server.

This package provides:
- The PlantUML text encoding used in GET request paths (raw DEFLATE plus a
  custom 6-bit alphabet)
- An async HTTP transport that selects GET or POST, retries once on 403 and
  classifies the response
"""

__version__ = "1.0.0"
