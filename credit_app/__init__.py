"""
Credit Application Service

A FastAPI-based service that registers customers and records the
credits (loans) requested against them.
"""

__version__ = "0.1.0"
