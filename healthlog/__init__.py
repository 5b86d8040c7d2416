"""Source package for the HealthLog insights service."""
