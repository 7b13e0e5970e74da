"""Infrastructure adapters: file input, coding expressions, logging and loading."""
