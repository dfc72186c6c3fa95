"""Application layer: use cases and DTOs between the API and the core."""
