"""Infrastructure layer: registry, exception table, validation and logging adapters."""
