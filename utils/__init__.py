"""Performance monitoring and debugging utilities."""
