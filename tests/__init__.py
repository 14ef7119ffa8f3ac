"""Test suite for error-responder.

Test structure:
- unit/: Unit tests - builder, registry, exception table, adapters, formatters
- api/: API tests - FastAPI exception handlers end-to-end with TestClient
- fixtures/: Importable application exceptions shared by both
"""
