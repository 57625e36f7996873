"""Domain layer - role categories, role sets and errors."""
