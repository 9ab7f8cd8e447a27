"""
Job board ranking service: candidate-specific job ranking, suggestions and
company lookups over MongoDB.
"""

__version__ = "1.0.0"
