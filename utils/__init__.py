"""
Shared helpers: dispatch decorators and exception types.
"""
