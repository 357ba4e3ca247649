"""Core gameplay primitives (board, placement, win detection, rendering).

Kept free of FastAPI concerns so it can be reused by API routes, the session, and tests.
"""
