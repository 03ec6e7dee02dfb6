"""Configuration for the inference client."""
