"""Core PATH logic: composition, clash detection and configuration."""
