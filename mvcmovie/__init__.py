"""MvcMovie: a movie and review catalog served as a web application."""

__version__ = "1.0.0"
