"""Custom REST fields: definitions, collections, registration and per-request processing."""
