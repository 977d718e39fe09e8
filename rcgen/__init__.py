"""rcgen -- scaffolds React components (source, style, story, test, index)."""

__version__ = "0.1.0"
