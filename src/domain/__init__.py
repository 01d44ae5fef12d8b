"""Domain layer: canonical models and pure transforms."""
