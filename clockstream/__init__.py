"""clockstream — push the server clock to browsers over Server-Sent Events."""

__version__ = "0.1.0"
