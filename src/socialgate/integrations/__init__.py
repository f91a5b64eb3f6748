"""Framework integrations for socialgate."""
