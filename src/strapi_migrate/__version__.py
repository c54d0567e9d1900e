"""Version information for strapi-migrate."""

__version__ = "0.1.0"
