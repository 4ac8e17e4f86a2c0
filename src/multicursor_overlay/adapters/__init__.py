"""Host adapters for the overlay engine."""
