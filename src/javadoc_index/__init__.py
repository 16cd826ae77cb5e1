"""Build Emacs javadoc-lookup indexes from generated API documentation."""

__version__ = "0.1.0"
