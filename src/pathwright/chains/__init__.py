"""Orchestration chains that report engine results to users."""
