"""
Test Suite
==========

Test suite matching the puml_render/ package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: Rendering against a local PlantUML stand-in server
"""
