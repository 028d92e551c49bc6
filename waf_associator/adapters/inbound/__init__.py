"""Inbound adapters - Driving side (CLI, service file)."""
