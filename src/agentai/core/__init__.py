"""Core: domain, contracts and configuration. No HTTP here."""
