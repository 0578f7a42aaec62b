"""Settings, clipboard, selection, search, breadcrumb and navigation logic for a cloud file-storage client."""

__version__ = "0.1.0"