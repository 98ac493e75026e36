"""Drivers for the external speech-to-text and vision providers."""

from .providers_base import ProviderDriver
from .providers_transcription import WhisperTranscriptionDriver
from .providers_vision import VisionAnalysisDriver, build_analysis_prompt

__all__ = [
    "ProviderDriver",
    "VisionAnalysisDriver",
    "WhisperTranscriptionDriver",
    "build_analysis_prompt",
]
