"""Run context, configuration and process helpers."""
