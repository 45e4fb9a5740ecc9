"""Database clients and utilities."""

from .supabase import create_backend_client

__all__ = ["create_backend_client"]
