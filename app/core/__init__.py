"""Core configuration, persistence wiring, security primitives and error kinds."""
