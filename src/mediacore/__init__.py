"""Media processing core: voice-note transcription and image analysis."""

__version__ = "0.1.0"
