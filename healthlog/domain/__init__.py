"""Pure analytics over daily health records."""
