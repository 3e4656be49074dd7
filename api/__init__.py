"""
Task Tracker API - HTTP surface and task store

Provides:
- TaskStore contract and the in-memory implementation
- FastAPI application mapping /tasks routes onto the store
"""

__version__ = "1.0.0"
