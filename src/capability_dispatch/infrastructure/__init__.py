"""Infrastructure layer: adapters, registry and logging."""
