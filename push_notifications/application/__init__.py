"""Application layer: request processing orchestration."""
