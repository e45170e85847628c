"""Infrastructure adapters - database access and repositories."""
