"""binsample command-line interface."""
