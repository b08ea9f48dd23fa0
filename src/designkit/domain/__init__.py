"""Domain layer - capability ports, exceptions, pricing strategies and the event hub."""
