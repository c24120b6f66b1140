"""Judge-agnostic domain logic: models, rating conversion and calendar aggregation."""
