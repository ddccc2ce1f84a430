"""pagepress - publish bookmarks and about pages to Dropbox."""

__version__ = "0.3.0"
