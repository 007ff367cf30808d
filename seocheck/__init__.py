"""Page-level SEO issue checks and the data records they work on."""

__version__ = "0.1.0"