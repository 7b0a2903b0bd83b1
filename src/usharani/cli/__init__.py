"""Command-line interface for usharani."""
