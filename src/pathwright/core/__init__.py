"""Core types: errors, result schemas and configuration."""
