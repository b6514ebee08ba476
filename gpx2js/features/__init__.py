"""
Feature modules for gpx2js.

Each feature is a self-contained module with:
- schemas.py - Data types
- service.py - Orchestration
- one module per pipeline step
"""
