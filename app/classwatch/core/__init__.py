"""Core infrastructure: application paths and configuration."""
