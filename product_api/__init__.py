"""In-memory product catalogue served over HTTP."""
