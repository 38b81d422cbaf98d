"""Application layer: identifier facade service and DTOs."""
