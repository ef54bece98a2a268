"""Reading Standard MIDI Files and parsing live MIDI messages."""

__version__ = "0.1.0"