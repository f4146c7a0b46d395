"""Application components."""
