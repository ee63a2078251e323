"""Domain models and the action registry.

Why:
- Pure data (Pydantic v2 models, a constant mapping) lives here.
- The domain knows nothing about HTTP, the CLI or environment variables.
"""
