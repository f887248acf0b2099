"""Infrastructure - logging and schema file loading."""
