"""Disaster alerts client: live event list and push notification opt-in."""
