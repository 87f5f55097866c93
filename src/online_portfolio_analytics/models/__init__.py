"""Enums and value types shared by the statistics."""
