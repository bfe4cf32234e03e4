"""Building blocks for spell checking documentation: configuration, dictionaries, quirks, arguments and patching."""

__version__ = "0.1.0"