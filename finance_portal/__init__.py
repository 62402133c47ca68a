"""
Finance Portal - Source Package

A small income/expense ledger: a REST service that stores transactions
in MongoDB, and a Streamlit page that records and lists them.

DESIGN PRINCIPLES:
1. Money is always an exact Decimal, never a float
2. The store assigns ids; the service never invents them
3. Malformed requests never reach the store
4. Dependencies are passed in explicitly
"""

__version__ = "1.0.0"
__author__ = "Finance Portal Team"
