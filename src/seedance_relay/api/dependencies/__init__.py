"""
FastAPI dependencies for request processing.
"""
