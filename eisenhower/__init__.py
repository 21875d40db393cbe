"""
FILE: eisenhower/__init__.py
PURPOSE: Eisenhower matrix task triage (inbox + four quadrants)
"""

__version__ = "0.1.0"
