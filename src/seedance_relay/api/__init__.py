"""
FastAPI application layer for the Seedance relay.

Exposes the video generation relay endpoints and a liveness check.
"""
