"""
Data Models
===========

Pydantic models for render requests and results.
"""
