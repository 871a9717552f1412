"""Command line interface for PDF tools."""
