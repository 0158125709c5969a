"""Domain layer - models, protocols and pure components."""
