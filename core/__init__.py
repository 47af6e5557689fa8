"""Cross-cutting concerns: errors and structured logging."""
