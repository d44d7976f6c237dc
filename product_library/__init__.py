"""
Product Library - in-memory catalog of books and journals with a FastAPI front.
"""

__version__ = "1.0.0"
