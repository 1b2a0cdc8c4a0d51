"""Request metrics for the web application."""
