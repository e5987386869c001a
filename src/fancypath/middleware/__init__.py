"""Middleware — attach a fresh PathMatch to every request scope."""
