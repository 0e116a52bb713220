"""dfget client file utilities."""
