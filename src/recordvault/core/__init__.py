"""Domain core: models, stores, services and their schemas."""
