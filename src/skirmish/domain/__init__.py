"""Domain model: capabilities, equipment, consumables and characters."""
