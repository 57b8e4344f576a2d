"""Command-line interface for llm-dispatch."""
