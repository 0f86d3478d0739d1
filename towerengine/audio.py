"""Playing sound effects, background music and controllable samples."""

from __future__ import annotations

from typing import Any, Optional

import pygame

from .errors import EngineError
from .log import LogType, log
from .resources import Resources, get_resources


class SampleInstance:
    """One playable use of a sound, with its own loop flag, volume and start position.

    ``sample`` is a sound such as a pygame ``Sound``: it offers
    ``get_length()`` and ``play(loops=...)`` returning a channel or None.
    """

    def __init__(self, sample: Any) -> None:
        self.sample = sample
        self.loop = False
        self._volume = 1.0
        self._position = 0.0
        self._channel: Any = None
        self._sound: Any = None

    @property
    def length(self) -> float:
        """Length of the sound in seconds."""
        return float(self.sample.get_length())

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"volume must not be negative: {value}")
        self._volume = float(value)
        if self.playing:
            self._channel.set_volume(self._volume)

    @property
    def position(self) -> float:
        """Where playback starts, in seconds from the beginning."""
        return self._position

    @position.setter
    def position(self, value: float) -> None:
        if not 0 <= value <= self.length:
            raise ValueError(f"position out of range: {value}")
        self._position = float(value)

    @property
    def playing(self) -> bool:
        return (
            self._channel is not None
            and bool(self._channel.get_busy())
            and self._channel.get_sound() is self._sound
        )

    def _sound_from_position(self) -> Any:
        mixer = pygame.mixer.get_init()
        if mixer is None:
            raise EngineError("audio mixer is not initialised")
        frequency, size, channels = mixer
        frame = abs(size) // 8 * channels
        offset = int(frequency * self._position) * frame
        return pygame.mixer.Sound(buffer=self.sample.get_raw()[offset:])

    def play(self) -> bool:
        """Start playing; return whether playback started."""
        sound = self.sample if self._position == 0 else self._sound_from_position()
        channel = sound.play(loops=-1 if self.loop else 0)
        if channel is None:
            return False
        channel.set_volume(self._volume)
        self._channel = channel
        self._sound = sound
        return True

    def stop(self) -> bool:
        """Stop playing; return whether there was playback to stop."""
        if self._channel is None:
            return False
        self._channel.stop()
        self._channel = None
        self._sound = None
        return True


class AudioPlayer:
    """Plays sounds taken from a resource cache at the configured volumes."""

    def __init__(
        self,
        resources: Optional[Resources] = None,
        bgm_volume: float = 1.0,
        sfx_volume: float = 1.0,
    ) -> None:
        self.resources = resources if resources is not None else get_resources()
        self.bgm_volume = bgm_volume
        self.sfx_volume = sfx_volume

    def play_audio(self, audio: str) -> Any:
        """Play ``audio`` once at the effects volume; return its channel or None."""
        channel = self.resources.get_sample(audio).play(loops=0)
        if channel is None:
            log(LogType.INFO, "failed to play audio (once)")
            return None
        channel.set_volume(self.sfx_volume)
        log(LogType.VERBOSE, "played audio (once)")
        return channel

    def play_bgm(self, audio: str) -> Any:
        """Play ``audio`` in a loop at the music volume; return its channel or None."""
        channel = self.resources.get_sample(audio).play(loops=-1)
        if channel is None:
            log(LogType.INFO, "failed to play audio (bgm)")
            return None
        channel.set_volume(self.bgm_volume)
        log(LogType.VERBOSE, "played audio (bgm)")
        return channel

    def stop_bgm(self, channel: Any) -> None:
        """Stop the music playing on ``channel``."""
        if channel is not None:
            channel.stop()
        log(LogType.INFO, "stopped audio (bgm)")

    def play_sample(
        self, audio: str, loop: bool = False, volume: float = 1.0, position: float = 0.0
    ) -> SampleInstance:
        """Start a new instance of ``audio`` and return it.

        Raises EngineError if the volume or position cannot be applied.
        """
        instance = self.resources.get_sample_instance(audio)
        instance.loop = loop
        if volume != 1:
            self.change_sample_volume(instance, volume)
        if position != 0:
            self.change_sample_position(instance, position)
        if instance.play():
            log(LogType.VERBOSE, "played audio (sample)")
        else:
            log(LogType.INFO, "failed to play audio (sample)")
        return instance

    def stop_sample(self, instance: SampleInstance) -> None:
        """Stop ``instance`` if it is playing."""
        if not instance.playing:
            return
        if instance.stop():
            log(LogType.INFO, "stopped audio (sample)")
        else:
            log(LogType.INFO, "failed to stop audio (sample)")

    def change_sample_volume(self, instance: SampleInstance, volume: float) -> None:
        """Set the volume of ``instance``; raises EngineError if it is invalid."""
        try:
            instance.volume = volume
        except ValueError as exc:
            raise EngineError(f"failed to change sample volume to {volume:.6f}") from exc

    def change_sample_position(self, instance: SampleInstance, position: float) -> None:
        """Set where ``instance`` starts, in seconds; raises EngineError if out of range."""
        try:
            instance.position = position
        except ValueError as exc:
            raise EngineError(f"failed to change sample position to {position:.6f} s") from exc

    def get_sample_length(self, instance: SampleInstance) -> int:
        """Return the length of ``instance`` in whole seconds."""
        return int(instance.length)