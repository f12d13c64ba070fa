"""Adapters for external inputs."""
