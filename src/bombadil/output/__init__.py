"""Terminal output for service results."""
