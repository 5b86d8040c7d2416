"""Application use cases orchestrating storage and the analytics domain."""
