"""HTTP plumbing shared by the route modules."""
