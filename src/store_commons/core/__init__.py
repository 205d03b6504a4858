"""Core building blocks shared by all store-commons features."""
