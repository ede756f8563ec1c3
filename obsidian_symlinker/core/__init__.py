"""Core discovery, validation and linking logic."""
