"""Feature packages implementing the discover/inspect/maintain pipeline."""
