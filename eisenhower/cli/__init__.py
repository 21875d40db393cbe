"""
FILE: eisenhower/cli/__init__.py
PURPOSE: Typer-based one-shot command line interface
"""
