"""Extraction pipeline and download proxy services."""
