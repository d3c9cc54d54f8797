"""
API layer for the To-do API.

Exposes the HTTP endpoints under /auth and /tasks, plus the JSON error
handlers shared by every route.
"""
