"""
Encoding Module
===============

PlantUML text encoding for GET request paths.

Components:
- encoder: raw DEFLATE compression and the PlantUML 6-bit alphabet
"""
