"""
Seedance relay: a thin HTTP proxy in front of a hosted image-to-video model.
"""

__version__ = "1.0.0"
