"""Command line interface for autoledger."""
