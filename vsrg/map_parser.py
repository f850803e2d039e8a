"""Parser for BMS chart files: header metadata, keysounds and note timing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from os import PathLike

DEFINITION_SETTER = "*----------------------"

_NOTE_RANGES = (
    # (min, max, player, is_regular_note, is_hidden, lane offset)
    (11, 19, 1, True, False, 10),
    (21, 29, 2, True, False, 20),
    (31, 39, 1, False, True, 30),
    (41, 49, 2, False, True, 40),
    (51, 59, 1, False, False, 50),
    (61, 69, 2, False, False, 60),
)

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*("
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf(?:inity)?|nan)"
    r")",
    re.IGNORECASE,
)


class ChannelType(Enum):
    """Kind of event a main data channel carries."""

    BGM = auto()
    MINUTE_OMIT = auto()
    BPM_CHANGE = auto()
    EXTENDED_BPM_CHANGE = auto()
    BGA = auto()
    NOTE = auto()
    UNDEFINED = auto()


@dataclass(frozen=True)
class NoteType:
    """Player side and kind of a note channel."""

    player: int
    is_regular_note: bool
    is_hidden: bool


@dataclass
class Header:
    """Header section of a chart."""

    metadata: dict[str, str] = field(default_factory=dict)
    audios: dict[str, str] = field(default_factory=dict)
    bitmaps: dict[str, str] = field(default_factory=dict)


@dataclass
class Note:
    """A note on a lane; times are in milliseconds."""

    lane_index: int
    start_time: float
    end_time: float
    is_hidden: bool = False


@dataclass
class Map:
    """A parsed chart."""

    header: Header = field(default_factory=Header)
    bgms: dict[float, str] = field(default_factory=dict)
    notes: list[Note] = field(default_factory=list)


@dataclass
class MainDataLine:
    """One ``#aaabb:cccc`` line of the main data section."""

    measure: int
    channel: int
    objects: list[str] = field(default_factory=list)


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    return int(match.group(1))


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return float(match.group(1))


def find_field_range(lines: list[str], field_name: str) -> tuple[int, int]:
    """Return the (start, end) line indices of a named section's body."""
    marker = f"{DEFINITION_SETTER} {field_name}"
    start = next((i + 1 for i, line in enumerate(lines) if marker in line), None)
    if start is None:
        raise ValueError(f"{field_name} start not found")
    end = next(
        (i for i in range(start, len(lines)) if DEFINITION_SETTER in lines[i]),
        len(lines),
    )
    return start, end


def parse_header_line(line: str) -> tuple[str, str]:
    """Split ``#KEY value`` into key and value."""
    pos = line.find(" ")
    if pos == -1:
        raise ValueError(f"Invalid header line format: {line}")
    return line[1:pos], line[pos + 1 :]


def _section_commands(lines: list[str], field_name: str):
    start, end = find_field_range(lines, field_name)
    for line in lines[start:end]:
        if line.startswith("#"):
            yield line


def parse_header(lines: list[str]) -> Header:
    """Parse the HEADER and EXPANSION sections."""
    header = Header()

    for line in _section_commands(lines, "HEADER"):
        key, value = parse_header_line(line)
        if len(key) <= 3:
            header.metadata[key] = value
            continue
        obj = key[3:]
        if len(obj) != 2:
            header.metadata[key] = value
            continue
        if key[:3] == "WAV":
            header.audios[obj] = value

    for line in _section_commands(lines, "EXPANSION"):
        try:
            key, value = parse_header_line(line)
        except ValueError:
            header.metadata[line[1:]] = ""
        else:
            header.metadata[key] = value

    return header


def parse_main_data_line(line: str) -> MainDataLine:
    """Parse one main data line into measure, channel and two-character objects."""
    if len(line) < 7:
        raise ValueError(f"Main data line too short: {line}")
    measure = _leading_int(line[1:4])
    channel = _leading_int(line[4:6])
    objects_str = line[7:]
    objects = [objects_str[i : i + 2] for i in range(0, len(objects_str), 2)]
    return MainDataLine(measure, channel, objects)


def concat_main_data(data: list[MainDataLine]) -> list[MainDataLine]:
    """Merge consecutive lines that share measure and channel."""
    merged: list[MainDataLine] = []
    for entry in data:
        last = merged[-1] if merged else None
        if last is not None and last.measure == entry.measure and last.channel == entry.channel:
            last.objects.extend(entry.objects)
        else:
            merged.append(MainDataLine(entry.measure, entry.channel, list(entry.objects)))
    return merged


def _note_range(channel: int):
    return next((r for r in _NOTE_RANGES if r[0] <= channel <= r[1]), None)


def get_note_type(channel: int) -> NoteType:
    """Return the note type for a note channel."""
    found = _note_range(channel)
    if found is None:
        raise ValueError(f"Unknown note type for channel: {channel}")
    _, _, player, is_regular, is_hidden, _ = found
    return NoteType(player, is_regular, is_hidden)


_FIXED_CHANNELS = {
    1: ChannelType.BGM,
    2: ChannelType.MINUTE_OMIT,
    3: ChannelType.BPM_CHANGE,
    4: ChannelType.BGA,
    8: ChannelType.EXTENDED_BPM_CHANGE,
}


def get_channel_type(channel: int) -> ChannelType:
    """Classify a channel number."""
    if channel in _FIXED_CHANNELS:
        return _FIXED_CHANNELS[channel]
    try:
        get_note_type(channel)
    except ValueError:
        return ChannelType.UNDEFINED
    return ChannelType.NOTE


def get_lane_index(channel: int) -> int:
    """Map a channel to a 7K lane: 0 is scratch, 1 to 7 are keys."""
    found = _note_range(channel)
    key = channel - found[5] if found is not None else channel

    if key == 6:
        return 0
    if 1 <= key <= 5:
        return key
    if 8 <= key <= 9:
        return key - 2
    raise ValueError(f"Invalid channel for lane index: {key}")


def parse_main_data(lines: list[str], initial_bpm: float, map_out: Map) -> None:
    """Append the notes of the MAIN DATA section to ``map_out``."""
    parsed = []
    for line in _section_commands(lines, "MAIN DATA"):
        try:
            parsed.append(parse_main_data_line(line))
        except ValueError as exc:
            raise ValueError(f"Invalid main data line format: {line}") from exc

    if initial_bpm == 0:
        raise ValueError("BPM must not be zero")
    measure_interval = (60.0 / initial_bpm) * 4 * 1000
    long_note_starts: dict[int, float] = {}

    for entry in concat_main_data(parsed):
        if not entry.objects:
            continue
        measure_start = entry.measure * measure_interval
        beat_interval = measure_interval / len(entry.objects)

        for position, obj in enumerate(entry.objects):
            if obj == "00":
                continue
            if get_channel_type(entry.channel) is not ChannelType.NOTE:
                continue

            note_type = get_note_type(entry.channel)
            lane = get_lane_index(entry.channel)
            time = measure_start + position * beat_interval

            if note_type.is_regular_note:
                map_out.notes.append(Note(lane, time, time, note_type.is_hidden))
                continue

            start = long_note_starts.pop(lane, None)
            if start is None:
                long_note_starts[lane] = time
            else:
                map_out.notes.append(Note(lane, start, time, note_type.is_hidden))


def parse_map(lines: list[str]) -> Map:
    """Parse a chart given as a list of lines."""
    if not lines:
        raise ValueError("Input lines are empty")

    chart = Map(header=parse_header(lines))

    try:
        initial_bpm = _leading_float(chart.header.metadata["BPM"])
    except (KeyError, ValueError) as exc:
        raise ValueError(f"BPM not found in header or invalid format: {exc}") from exc

    parse_main_data(lines, initial_bpm, chart)
    return chart


def parse_map_file(path: str | PathLike[str]) -> Map:
    """Read and parse a chart file."""
    with open(path, encoding="utf-8", errors="surrogateescape") as handle:
        lines = handle.read().splitlines()
    return parse_map(lines)