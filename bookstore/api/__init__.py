"""HTTP boundary of the catalog."""
