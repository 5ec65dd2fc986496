"""Inbound webhook receiver: callback models, event handlers and the app factory."""
