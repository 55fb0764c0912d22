"""Value types shared across models and the CLI.

These modules hold plain runtime types with no Pydantic dependency.
"""
