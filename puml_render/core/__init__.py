"""
Core Business Logic
==================

Core modules for diagram encoding and SVG retrieval.

Modules:
- encoding: PlantUML text compression and 6-bit token encoding
- rendering: HTTP transport against a PlantUML server
"""
