"""Infrastructure adapters for domain protocols."""
