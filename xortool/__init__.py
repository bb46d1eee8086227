"""xortool - reversible repeating-key XOR over files and directory trees."""

__version__ = "0.1.0"
