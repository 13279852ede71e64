"""Design-time model of HTTP APIs: types, media types, responses, resources and routes."""

__version__ = "0.1.0"