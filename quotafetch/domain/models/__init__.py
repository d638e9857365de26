"""Domain models: value objects, decode targets and errors."""
