"""Domain layer: identifier families, checksum algorithms, detection and scanning."""
