"""goagent API layer: configuration, rendering and service commands."""
