"""
Shared utilities: logging, error handling, responses, pagination and serialization.
"""
