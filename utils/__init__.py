"""
Shared exceptions and decorators.
"""
