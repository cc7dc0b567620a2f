"""Python client for the product API."""
