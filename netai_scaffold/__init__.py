"""netai-scaffold: project skeleton generator for the Network AI Platform."""

__version__ = "0.1.0"
