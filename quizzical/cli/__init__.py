"""Terminal presentation for the quiz."""
