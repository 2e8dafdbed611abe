"""Service layer for jpackager."""
