"""
Shared utilities for pixeltiles.
"""
