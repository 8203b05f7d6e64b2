"""Adapters implementing the domain ports on top of SQLAlchemy and GraphQL libraries."""
