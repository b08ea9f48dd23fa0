"""Application layer - commands, command handlers and the command bus."""
