"""Standard MIDI file loading, merged into one timed stream of messages."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from operator import itemgetter
from typing import BinaryIO

from .binary_reader import (
    discard_data,
    read_four_cc,
    read_i16_big_endian,
    read_i32_big_endian,
    read_i32_variable_length,
    read_u8,
)
from .errors import MidiFileError, MidiFileErrorKind

_DEFAULT_TEMPO = 120.0


class MidiFileLoopType(Enum):
    """The loop extension used when reading a MIDI file."""

    LOOP_POINT = auto()
    """The loop start point is given as a tick value."""
    RPG_MAKER = auto()
    """CC #111 marks the loop start."""
    INCREDIBLE_MACHINE = auto()
    """CC #110 and #111 mark the loop start and end."""
    FINAL_FANTASY = auto()
    """CC #116 and #117 mark the loop start and end."""


class MessageType(IntEnum):
    """Kinds of message kept in a loaded MIDI file."""

    NORMAL = 0
    TEMPO_CHANGE = 252
    LOOP_START = 253
    LOOP_END = 254
    END_OF_TRACK = 255


_LOOP_CONTROLLERS: dict[MidiFileLoopType, dict[int, MessageType]] = {
    MidiFileLoopType.RPG_MAKER: {111: MessageType.LOOP_START},
    MidiFileLoopType.INCREDIBLE_MACHINE: {
        110: MessageType.LOOP_START,
        111: MessageType.LOOP_END,
    },
    MidiFileLoopType.FINAL_FANTASY: {
        116: MessageType.LOOP_START,
        117: MessageType.LOOP_END,
    },
}


@dataclass(frozen=True)
class Message:
    """A channel message, or a marker whose kind is stored in ``channel``."""

    channel: int
    command: int
    data1: int = 0
    data2: int = 0

    @classmethod
    def common1(cls, status: int, data1: int) -> Message:
        """Build a message that carries one data byte."""
        return cls(status & 0x0F, status & 0xF0, data1, 0)

    @classmethod
    def common2(
        cls, status: int, data1: int, data2: int, loop_type: MidiFileLoopType
    ) -> Message:
        """Build a message with two data bytes, recognising loop controllers."""
        command = status & 0xF0
        if command == 0xB0:
            marker = _LOOP_CONTROLLERS.get(loop_type, {}).get(data1)
            if marker is not None:
                return cls(int(marker), 0, 0, 0)
        return cls(status & 0x0F, command, data1, data2)

    @classmethod
    def tempo_change(cls, tempo: int) -> Message:
        """Build a tempo change from microseconds per quarter note."""
        return cls(
            int(MessageType.TEMPO_CHANGE),
            (tempo >> 16) & 0xFF,
            (tempo >> 8) & 0xFF,
            tempo & 0xFF,
        )

    @classmethod
    def loop_start(cls) -> Message:
        """Build a loop start marker."""
        return cls(int(MessageType.LOOP_START), 0, 0, 0)

    @classmethod
    def loop_end(cls) -> Message:
        """Build a loop end marker."""
        return cls(int(MessageType.LOOP_END), 0, 0, 0)

    @classmethod
    def end_of_track(cls) -> Message:
        """Build an end-of-track marker."""
        return cls(int(MessageType.END_OF_TRACK), 0, 0, 0)

    @property
    def message_type(self) -> MessageType:
        """The kind of this message."""
        if self.channel >= MessageType.TEMPO_CHANGE:
            return MessageType(self.channel)
        return MessageType.NORMAL

    @property
    def tempo(self) -> float:
        """The tempo in beats per minute carried by a tempo change."""
        microseconds = (self.command << 16) | (self.data1 << 8) | self.data2
        if microseconds == 0:
            return math.inf
        return 60_000_000.0 / microseconds


class _CountingReader:
    """Wraps a stream and counts the bytes taken from it."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.bytes_read = 0

    def read(self, size: int) -> bytes:
        data = self._stream.read(size)
        self.bytes_read += len(data)
        return data


def _skip_sized_data(stream) -> None:
    discard_data(stream, read_i32_variable_length(stream))


def _read_tempo(stream) -> int:
    if read_i32_variable_length(stream) != 3:
        raise MidiFileError(MidiFileErrorKind.INVALID_TEMPO_VALUE)
    b1 = read_u8(stream)
    b2 = read_u8(stream)
    b3 = read_u8(stream)
    return (b1 << 16) | (b2 << 8) | b3


def _read_track(
    stream: BinaryIO, loop_type: MidiFileLoopType
) -> tuple[list[Message], list[int]]:
    chunk_type = read_four_cc(stream)
    if chunk_type != "MTrk":
        raise MidiFileError(
            MidiFileErrorKind.INVALID_CHUNK_TYPE, expected="MTrk", actual=chunk_type
        )

    size = read_i32_big_endian(stream)
    reader = _CountingReader(stream)

    messages: list[Message] = []
    ticks: list[int] = []
    tick = 0
    last_status = 0

    while True:
        delta = read_i32_variable_length(reader)
        first = read_u8(reader)
        tick += delta

        if not first & 0x80:
            # Running status: the byte just read is the first data byte.
            if last_status & 0xF0 in (0xC0, 0xD0):
                messages.append(Message.common1(last_status, first))
            else:
                data2 = read_u8(reader)
                messages.append(Message.common2(last_status, first, data2, loop_type))
            ticks.append(tick)
            continue

        if first in (0xF0, 0xF7):
            _skip_sized_data(reader)
        elif first == 0xFF:
            meta_type = read_u8(reader)
            if meta_type == 0x2F:
                read_u8(reader)
                messages.append(Message.end_of_track())
                ticks.append(tick)
                # Events placed after the end of track are ignored.
                if reader.bytes_read < size:
                    discard_data(reader, size - reader.bytes_read)
                return messages, ticks
            if meta_type == 0x51:
                messages.append(Message.tempo_change(_read_tempo(reader)))
                ticks.append(tick)
            else:
                _skip_sized_data(reader)
        else:
            data1 = read_u8(reader)
            if first & 0xF0 in (0xC0, 0xD0):
                messages.append(Message.common1(first, data1))
            else:
                data2 = read_u8(reader)
                messages.append(Message.common2(first, data1, data2, loop_type))
            ticks.append(tick)

        last_status = first


def _merge_tracks(
    message_lists: list[list[Message]], tick_lists: list[list[int]], resolution: int
) -> tuple[list[Message], list[float]]:
    events = heapq.merge(
        *(zip(ticks, messages) for ticks, messages in zip(tick_lists, message_lists)),
        key=itemgetter(0),
    )

    merged_messages: list[Message] = []
    merged_times: list[float] = []
    current_tick = 0
    current_time = 0.0
    tempo = _DEFAULT_TEMPO

    for tick, message in events:
        current_time += 60.0 / (resolution * tempo) * (tick - current_tick)
        current_tick = tick
        if message.message_type is MessageType.TEMPO_CHANGE:
            tempo = message.tempo
        else:
            merged_messages.append(message)
            merged_times.append(current_time)

    return merged_messages, merged_times


class MidiFile:
    """A standard MIDI file, its tracks merged and timed in seconds."""

    def __init__(
        self,
        stream: BinaryIO,
        loop_type: MidiFileLoopType = MidiFileLoopType.LOOP_POINT,
        loop_point: int = 0,
    ) -> None:
        try:
            self.messages, self.times = self._load(stream, loop_type, loop_point)
        except (EOFError, ValueError) as exc:
            raise MidiFileError(MidiFileErrorKind.IO_ERROR, error=exc) from exc

    @staticmethod
    def _load(
        stream: BinaryIO, loop_type: MidiFileLoopType, loop_point: int
    ) -> tuple[list[Message], list[float]]:
        chunk_type = read_four_cc(stream)
        if chunk_type != "MThd":
            raise MidiFileError(
                MidiFileErrorKind.INVALID_CHUNK_TYPE, expected="MThd", actual=chunk_type
            )

        if read_i32_big_endian(stream) != 6:
            raise MidiFileError(MidiFileErrorKind.INVALID_CHUNK_DATA, id="MThd")

        file_format = read_i16_big_endian(stream)
        if file_format not in (0, 1):
            raise MidiFileError(MidiFileErrorKind.UNSUPPORTED_FORMAT, format=file_format)

        track_count = read_i16_big_endian(stream)
        resolution = read_i16_big_endian(stream)

        message_lists: list[list[Message]] = []
        tick_lists: list[list[int]] = []
        for _ in range(track_count):
            messages, ticks = _read_track(stream, loop_type)
            message_lists.append(messages)
            tick_lists.append(ticks)

        if loop_type is MidiFileLoopType.LOOP_POINT and loop_point != 0 and tick_lists:
            index = bisect_left(tick_lists[0], loop_point)
            tick_lists[0].insert(index, loop_point)
            message_lists[0].insert(index, Message.loop_start())

        return _merge_tracks(message_lists, tick_lists, resolution)

    @property
    def length(self) -> float:
        """The length of the file in seconds."""
        return self.times[-1]