"""Platform adapters: logging and other process-wide plumbing."""
