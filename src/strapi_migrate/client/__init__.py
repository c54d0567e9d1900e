"""HTTP access to the Strapi REST API."""

from .async_client import StrapiRequester
from .base import BaseRequester

__all__ = ["BaseRequester", "StrapiRequester"]
