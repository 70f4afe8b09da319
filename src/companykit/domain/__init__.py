"""Domain layer - roles, authorization and membership business rules."""
