"""Shell line tokenizing, pipeline and redirection parsing, executable lookup and tab completion."""

__version__ = "0.1.0"