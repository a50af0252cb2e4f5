"""Utility helpers for the geobase library."""
