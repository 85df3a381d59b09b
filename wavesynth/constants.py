"""Envelope stages and sample loop modes."""

from enum import IntEnum


class EnvelopeStage(IntEnum):
    """Stages an envelope passes through."""

    DELAY = 0
    ATTACK = 1
    HOLD = 2
    DECAY = 3
    RELEASE = 4


class LoopMode(IntEnum):
    """Sample loop modes; every mode currently shares the value 0."""

    NO_LOOP = 0
    CONTINUOUS = 0
    LOOP_UNTIL_NOTE_OFF = 0