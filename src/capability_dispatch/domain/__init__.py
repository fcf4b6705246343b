"""Domain layer: capability contract, ports and value objects."""
