"""Infrastructure layer: adapters for storage and other external systems."""
