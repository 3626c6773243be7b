"""Configuration and result models."""
