"""
In-memory todo task service
"""
__version__ = "1.0"
