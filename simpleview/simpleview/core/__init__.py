"""Configuration, request models and errors."""
