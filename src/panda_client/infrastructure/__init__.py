"""Infrastructure layer package."""
