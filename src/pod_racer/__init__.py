"""Decision core and match plumbing for an autonomous pod-racing pilot."""

__version__ = "0.1.0"
