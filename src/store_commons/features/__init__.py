"""Feature packages for store-commons."""
