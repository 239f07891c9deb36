"""Comment-driven issue label bot."""
