"""Adapters implementing the application ports against the local filesystem and environment."""
