"""binsample utilities."""
