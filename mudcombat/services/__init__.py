"""Combat presentation services."""
