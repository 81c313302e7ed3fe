"""Service (business) entities."""
