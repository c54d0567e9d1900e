"""Command line entry points: ``strapi-export`` and ``strapi-import``."""
