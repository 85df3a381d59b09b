"""MIDI file loading, SoundFont record readers, channel state, low-pass filter, chorus and LFO."""

__version__ = "0.1.0"