"""FastAPI service for the WEB 420 RESTful APIs.

This package provides REST API endpoints for composers, persons,
customers and their invoices, teams and their players, and user
signup and login, all backed by MongoDB.
"""

__version__ = "1.0.0"
