"""HTTP service for PDF tools."""
