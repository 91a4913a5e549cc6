"""Search tracing, plotting and test data helpers."""
