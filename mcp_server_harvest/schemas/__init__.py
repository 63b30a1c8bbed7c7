"""Pydantic models for Harvest records, list envelopes and tool inputs."""
