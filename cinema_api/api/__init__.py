"""
REST API layer: FastAPI app, routers, request schemas and validation.
"""
