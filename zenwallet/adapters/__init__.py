"""Adapters exposing the use cases to users."""
