"""Service layer between the controllers and the persistence gateway."""
