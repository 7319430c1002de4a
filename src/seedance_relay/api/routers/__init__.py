"""
API route handlers, one router per endpoint group.
"""
