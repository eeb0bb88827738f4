"""Domain modules for News Relay."""
