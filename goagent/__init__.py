"""GoCD agent service descriptor renderer and systemd installer."""

__version__ = "0.1.0"
