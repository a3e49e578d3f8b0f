"""LifePulse personal health service."""
