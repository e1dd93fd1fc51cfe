"""Document store interface and its MongoDB / in-memory backends."""
