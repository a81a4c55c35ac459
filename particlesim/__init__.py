"""Terminal particle-life simulation with interaction presets, random events and run statistics."""

__version__ = "0.1.0"