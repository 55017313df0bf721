"""Storage implementations of the tillbook_auth repository contracts."""
