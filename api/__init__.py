"""HTTP boundary for the queue simulator."""
