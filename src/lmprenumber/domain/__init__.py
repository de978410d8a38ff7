"""Domain layer: data file records and documents."""
