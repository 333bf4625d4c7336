"""HTTP layer: routers, dependencies, middleware and response models."""
