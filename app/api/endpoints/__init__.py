"""Endpoint routers: browse views, stats, health."""
