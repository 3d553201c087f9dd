"""Internal daemon endpoint modules."""
