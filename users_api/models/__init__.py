"""Request and response models for the Users API."""
