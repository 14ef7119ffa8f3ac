"""API tests package.

End-to-end tests for the FastAPI exception handlers using TestClient.
Tests the complete request/response cycle including:
- Exception resolution through the builder
- Validation failures rendered with field errors
- HTTP status codes and headers
"""
