"""
To-do API: root package.

This package contains the FastAPI app entry point (main.py), API routes,
use cases, validation schemas, domain models and the MongoDB infrastructure.
"""
