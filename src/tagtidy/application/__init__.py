"""Application layer orchestrating features into runs."""
