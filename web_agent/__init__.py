"""Branded web chat agent."""
