"""Export Figma layers as SVG/PNG files named after their layer names."""

__version__ = "0.1.0"
