"""Pure business-rule functions, free of persistence and HTTP concerns."""
