"""Profile locator adapter."""
