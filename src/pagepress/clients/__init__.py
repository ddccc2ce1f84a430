"""HTTP clients for Pinboard, the blog listing and Dropbox."""

from .base import ClientError, HTTPClient, PayloadError
from .blog import BlogClient
from .dropbox import DropboxClient
from .pinboard import Payload, PayloadKind, PinboardClient, strip_zero_width

__all__ = [
    # Base
    "HTTPClient",
    # Clients
    "BlogClient",
    "DropboxClient",
    "PinboardClient",
    # Payload handling
    "Payload",
    "PayloadKind",
    "strip_zero_width",
    # Exceptions
    "ClientError",
    "PayloadError",
]
