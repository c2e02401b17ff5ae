"""Route tree model read by the Swagger generator."""
