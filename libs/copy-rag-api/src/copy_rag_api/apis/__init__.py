"""REST API of the copy assistant."""
