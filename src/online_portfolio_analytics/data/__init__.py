"""Sample datasets."""
