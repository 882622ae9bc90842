"""Built-in program catalog."""
