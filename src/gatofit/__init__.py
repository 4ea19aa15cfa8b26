"""gatofit: keep track of your cat's weight."""

__version__ = "0.1.0"
