"""Read-only adapters for the upstream content services."""
