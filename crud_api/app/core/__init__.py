"""
Core infrastructure: settings, logging and error handling.
"""
