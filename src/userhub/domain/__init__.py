"""Domain layer: entities, business rules and repository interfaces."""
