"""Conversion of pydantic schemas into Swagger schema fragments."""
