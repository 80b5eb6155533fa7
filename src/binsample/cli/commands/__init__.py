"""binsample CLI subcommands."""
