# Path: readidx/core/__init__.py
"""Core infrastructure shared by readidx components."""
