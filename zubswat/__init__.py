"""An arcade game about swatting a creature that flees from the cursor."""

__version__ = "0.1.0"