"""Domain objects and services."""
