"""SmartDocs chunk artifact retrieval engine."""

__version__ = "0.1.0"
