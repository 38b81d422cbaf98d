"""Domain services: checksum algorithms, family registry, detection and scanning."""
