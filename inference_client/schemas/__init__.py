"""Pydantic models describing request and response bodies on the wire."""
