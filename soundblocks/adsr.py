"""Attack/decay/sustain/release envelope."""

import enum
import math

__all__ = ["AdsrSegment", "Adsr"]


class AdsrSegment(enum.IntEnum):
    """Stages of an :class:`Adsr` envelope."""

    IDLE = 0
    ATTACK = 1
    DECAY = 2
    RELEASE = 4


class Adsr:
    """Gate-driven ADSR envelope built from one-pole segments.

    ``sample_rate`` is divided by ``block_size`` and truncated to an integer
    when :meth:`process` is called once per block.
    """

    def __init__(self, sample_rate: float, block_size: int = 1) -> None:
        self._sample_rate = int(sample_rate / block_size)
        self._attack_shape = -1.0
        self._attack_target = 0.0
        self._attack_time = -1.0
        self._decay_time = -1.0
        self._release_time = -1.0
        self._attack_d0 = 0.0
        self._decay_d0 = 0.0
        self._release_d0 = 0.0
        self._sus_level = 0.7
        self._x = 0.0
        self._gate = False
        self._mode = AdsrSegment.IDLE

        self.set_time(AdsrSegment.ATTACK, 0.1)
        self.set_time(AdsrSegment.DECAY, 0.1)
        self.set_time(AdsrSegment.RELEASE, 0.1)

    def retrigger(self, hard: bool) -> None:
        """Restart the attack; a hard retrigger also resets the level to 0."""
        self._mode = AdsrSegment.ATTACK
        if hard:
            self._x = 0.0

    def set_time(self, segment: AdsrSegment, time: float) -> None:
        """Set the time of a segment in seconds; the idle segment is ignored."""
        segment = AdsrSegment(segment)
        if segment is AdsrSegment.ATTACK:
            self.set_attack_time(time, 0.0)
        elif segment is AdsrSegment.DECAY:
            self.set_decay_time(time)
        elif segment is AdsrSegment.RELEASE:
            self.set_release_time(time)

    def set_attack_time(self, time: float, shape: float = 0.0) -> None:
        """Set the attack time in seconds and the attack curve shape."""
        if time == self._attack_time and shape == self._attack_shape:
            return
        self._attack_time = time
        self._attack_shape = shape
        if time > 0.0:
            target = 9.0 * shape ** 10 + 0.3 * shape + 1.01
            self._attack_target = target
            log_target = math.log(1.0 - 1.0 / target)
            self._attack_d0 = 1.0 - math.exp(log_target / (time * self._sample_rate))
        else:
            self._attack_d0 = 1.0

    def _time_constant(self, time: float) -> float:
        if time > 0.0:
            return 1.0 - math.exp(math.log(1.0 / math.e) / (time * self._sample_rate))
        return 1.0

    def set_decay_time(self, time: float) -> None:
        """Set the decay time in seconds."""
        if time != self._decay_time:
            self._decay_time = time
            self._decay_d0 = self._time_constant(time)

    def set_release_time(self, time: float) -> None:
        """Set the release time in seconds."""
        if time != self._release_time:
            self._release_time = time
            self._release_d0 = self._time_constant(time)

    @property
    def sustain_level(self) -> float:
        """Sustain level; values <= 0 send the envelope to idle after decay."""
        return self._sus_level

    @sustain_level.setter
    def sustain_level(self, value: float) -> None:
        if value <= 0.0:
            value = -0.01
        elif value > 1.0:
            value = 1.0
        self._sus_level = value

    @property
    def current_segment(self) -> AdsrSegment:
        """Segment the envelope is in."""
        return self._mode

    @property
    def is_running(self) -> bool:
        """True while the envelope is not idle."""
        return self._mode is not AdsrSegment.IDLE

    def process(self, gate: bool) -> float:
        """Advance one sample with the given gate and return the level."""
        if gate and not self._gate:
            self._mode = AdsrSegment.ATTACK
        elif not gate and self._gate:
            self._mode = AdsrSegment.RELEASE
        self._gate = bool(gate)

        mode = self._mode
        if mode is AdsrSegment.ATTACK:
            self._x += self._attack_d0 * (self._attack_target - self._x)
            out = self._x
            if out > 1.0:
                self._x = out = 1.0
                self._mode = AdsrSegment.DECAY
            return out
        if mode is AdsrSegment.DECAY or mode is AdsrSegment.RELEASE:
            if mode is AdsrSegment.DECAY:
                d0, target = self._decay_d0, self._sus_level
            else:
                d0, target = self._release_d0, -0.01
            self._x += d0 * (target - self._x)
            out = self._x
            if out < 0.0:
                self._x = out = 0.0
                self._mode = AdsrSegment.IDLE
            return out
        return 0.0