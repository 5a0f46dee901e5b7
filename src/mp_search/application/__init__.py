"""Application – search registration and query use cases."""
