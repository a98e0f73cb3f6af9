"""Tool implementations, one module per Stadia Maps API family."""
