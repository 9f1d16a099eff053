"""Vector and matrix math, an event dispatcher with input tracking, and an entity-component-system."""

__version__ = "0.2.0"