"""Presentation layer: builder, formatters and FastAPI wiring."""
