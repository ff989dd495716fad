"""
Credit Service - Customer Credit Management

A FastAPI-based microservice that registers credits for existing
customers, computes installment values and serves credit lookups.
"""

__version__ = "0.1.0"
