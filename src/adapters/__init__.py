"""Adapters that connect the core to STRATZ and Discord."""
