"""Domain layer: value objects and protocols for error resolution."""
