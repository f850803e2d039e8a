"""The play scene: spawns note sprites per lane and scrolls them down."""

from __future__ import annotations

import json
import logging
import time
from collections import deque
from collections.abc import Callable
from os import PathLike
from pathlib import Path
from typing import Any

from vsrg.bmp_sprite import BmpSprite
from vsrg.json_util import get_mandatory
from vsrg.map_parser import Note, parse_map_file
from vsrg.prefab import PreFab
from vsrg.scene import Scene

logger = logging.getLogger(__name__)


class PlayScene(Scene):
    """Scene that plays a chart with a given skin.

    ``clock`` returns seconds; times inside the scene are in milliseconds.
    """

    key_count = 8  # 7 keys + scratch
    scroll_speed = 10.0

    def __init__(
        self,
        renderer: Any,
        map_file: str | PathLike[str],
        skin_name: str,
        x: int,
        y: int,
        width: int,
        height: int,
        *,
        skins_dir: str | PathLike[str] = "skins",
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__(x, y, width, height)
        self.renderer = renderer
        self.map_file = map_file
        self.skin_name = skin_name
        self._skin_root = Path(skins_dir) / skin_name / "play"
        self._clock = clock
        self.note_prefab = PreFab(0, 0)
        self.active_note_sprites: list[BmpSprite] = []

        self.lanes: list[deque[Note]] = self._load_notes(map_file)
        self.key_specific_skin_config = self._load_key_specific_skin_config()
        self.note_bmp_names = self._load_regular_note_bmp_names()

        self._game_clock = clock()
        self._prev_frame_time = self._game_clock
        self.regular_note_height = self.rect.h / 10.0

    def _load_notes(self, map_file: str | PathLike[str]) -> list[deque[Note]]:
        chart = parse_map_file(map_file)
        lanes: list[deque[Note]] = [deque() for _ in range(self.key_count)]
        for note in chart.notes:
            lanes[note.lane_index].append(note)
        return lanes

    def _load_key_specific_skin_config(self) -> dict[str, Any]:
        with open(self._skin_root / "config.json", encoding="utf-8") as handle:
            skin_config = json.load(handle)

        presets = get_mandatory(skin_config, "presets")
        candidates = presets.values() if isinstance(presets, dict) else presets
        for preset in candidates:
            if get_mandatory(preset, "key") == self.key_count:
                return preset

        raise ValueError(f"No key-specific skin config found for key count: {self.key_count}")

    def _load_regular_note_bmp_names(self) -> list[str]:
        names = get_mandatory(self.key_specific_skin_config, "regular_notes")
        if len(names) != self.key_count:
            raise ValueError(
                "Number of regular note BMP names does not match key count: "
                f"{len(names)} != {self.key_count}"
            )
        return [str(name) for name in names]

    def map_play_duration(self) -> float:
        """Milliseconds since the scene was created."""
        return (self._clock() - self._game_clock) * 1000.0

    def new_regular_note_sprite(self, lane_index: int) -> BmpSprite:
        """Create a note sprite just above the top of the given lane."""
        lane_width = self.rect.w // self.key_count
        if not 0 <= lane_index < self.key_count:
            raise IndexError(f"Lane index out of range: {lane_index}")

        note_height = int(self.regular_note_height)
        sprite = BmpSprite(
            self.renderer,
            self._skin_root / self.note_bmp_names[lane_index],
            self.rect.x + lane_index * lane_width,
            self.rect.y - note_height,
        )
        sprite.resize_self(lane_width, note_height)
        return sprite

    def update(self) -> None:
        """Spawn notes that are due and scroll every active note."""
        delta_time = (self._clock() - self._prev_frame_time) * 1000.0
        if delta_time < 0:
            logger.warning("Negative delta time detected, resetting to 0.")
            delta_time = 0.0

        all_lanes_empty = True
        # Notes appear a note-height early so they slide in rather than pop up.
        lead = 10 * self.regular_note_height / 10

        for lane in self.lanes:
            if not lane:
                continue
            all_lanes_empty = False
            note = lane[0]
            if note.start_time > self.map_play_duration() + lead:
                continue

            logger.debug("new note at lane %d with start time %s", note.lane_index, note.start_time)
            sprite = self.new_regular_note_sprite(note.lane_index)
            self.add_sprite(sprite)
            self.note_prefab.add_child(sprite)
            self.active_note_sprites.append(sprite)
            lane.popleft()

        self.note_prefab.move_by_all(0, self.scroll_speed * delta_time / 10)

        if all_lanes_empty:
            logger.debug("All notes are empty, no sprites to draw.")
            return

        self._prev_frame_time = self._clock()