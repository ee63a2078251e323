"""Core interfaces.

Why:
- Structural contracts (Protocol) that concrete adapters satisfy.
- The CLI and examples depend on the contract, tests can swap in fakes.
"""
