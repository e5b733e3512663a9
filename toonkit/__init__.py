"""Token-Oriented Object Notation (TOON) encoder, text helpers and interactive state model."""

__version__ = "0.4.5"