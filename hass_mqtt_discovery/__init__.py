"""Typed Home Assistant MQTT discovery payloads."""
