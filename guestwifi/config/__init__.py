"""Configuration - environment-driven application settings."""
