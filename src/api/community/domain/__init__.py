"""Community domain layer: aggregates, value objects and business rules."""
