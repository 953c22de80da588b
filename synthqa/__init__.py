"""synthqa - Evol-Instruct style synthetic question/answer/context generation."""

__version__ = "0.1.0"
