"""Core scoring logic — models, helpers, contrast math, calculators and the catalog.

This module is framework-agnostic. It has no dependency on MCP or any
presentation layer; the MCP server and any other front end import from here.
"""
