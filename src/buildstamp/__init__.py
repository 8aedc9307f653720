"""buildstamp — stamp build metadata into a library's metadata template."""

__version__ = "0.1.0"
