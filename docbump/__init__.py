"""docbump: compute the next semantic version of a versioned document."""
