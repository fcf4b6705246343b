"""Package metadata and naming constants."""

PACKAGE_NAME = "capability-dispatch"
PACKAGE_NAME_SHORT = "capdispatch"
DESCRIPTION = "Capability-dispatch facade: registry-based factory and adapters over heterogeneous actors"
