"""Supporting services: history persistence, recipients, example emails."""
