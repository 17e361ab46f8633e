"""
Core: configuration, errors and dependency injection.
"""
