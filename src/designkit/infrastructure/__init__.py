"""Infrastructure layer - singleton registry, factories, adapters, notifiers and logging."""
