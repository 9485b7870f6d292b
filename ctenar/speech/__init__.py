"""Speech-synthesis collaborator.

This package contains the synthesizer protocol, the system TTS implementation,
and voice selection helpers used when units are spoken.
"""

from .synthesizer import Pyttsx3Synthesizer, SpeechSynthesizer, create_synthesizer
from .voices import find_voice, preferred_voice

__all__ = [
    "Pyttsx3Synthesizer",
    "SpeechSynthesizer",
    "create_synthesizer",
    "find_voice",
    "preferred_voice",
]
