"""Shell identity adapter."""
