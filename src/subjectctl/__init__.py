"""subjectctl: hierarchical pub/sub subject codec and CLI."""

__version__ = "0.1.0"
