"""Terminal system monitor showing CPU, memory, disk, network and process activity."""

__version__ = "0.1.0"