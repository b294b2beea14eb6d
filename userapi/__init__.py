"""User CRUD REST service: FastAPI over a PostgreSQL users table."""

__version__ = "1.0.0"
