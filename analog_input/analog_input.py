"""
Analog Input Container
======================

Tracks the state of analog sources (stick axes, triggers) keyed by any
hashable identifier, and detects when they leave or enter their deadzone.

Each input is read through two thresholds:
    - the analog deadzone, below which :meth:`AnalogInput.value` reports ``0.0``
    - the coarser digital deadzone, above which :meth:`AnalogInput.value_digital`
      reports a fully-on ``ANALOG_MIN`` / ``ANALOG_MAX``

Usage Model
-----------
The caller owns the polling loop. Once per tick it:
    - calls ``set`` for every input sampled this tick
    - reads values and edges through the query methods
    - calls ``update`` to clear the edges before the next tick's samples

Example
-------
>>> from analog_input.analog_input import AnalogInput
>>> from analog_input.analog_value import AnalogInputValue
>>> from analog_input.input_signal import AnalogSignal
>>>
>>> pad = AnalogInput()
>>> pad.set(AnalogSignal.LEFT_STICK_X, AnalogInputValue.from_float(0.6))
>>> pad.just_activated(AnalogSignal.LEFT_STICK_X)
0.6
>>> pad.update()
>>> pad.just_activated(AnalogSignal.LEFT_STICK_X) is None
True
"""


import math
from typing import Dict, Generic, Hashable, KeysView, Mapping, Optional, Set, TypeVar, Union

from analog_input.analog_value import (
    ANALOG_MAX,
    ANALOG_MIN,
    DEFAULT_DEADZONE,
    DEFAULT_DEADZONE_DIGITAL,
    AnalogInputValue,
    Deadzone,
    RawSample,
)
from analog_input.input_config import AnalogInputConfig, validate_deadzone


T = TypeVar('T', bound=Hashable)


def _sign(value: float) -> float:
    return math.copysign(1.0, value)


class AnalogInput(Generic[T]):
    """
    Container for analog inputs.

    Notes
    -----
    - An input is only known after its first ``set``; unknown inputs read as
      inactive (``0.0`` / ``None`` / ``False``).
    - An input is never in both the activated and deactivated set of the same
      threshold at once.
    - Edge sets are cleared only by :meth:`update`.
    - No internal locking. Share across threads only with external
      synchronization.
    """

    def __init__(
            self,
            deadzone: float = float(DEFAULT_DEADZONE),
            deadzone_digital: float = float(DEFAULT_DEADZONE_DIGITAL)
        ):
        """
        Parameters
        ----------
        deadzone : float, optional
            Analog deadzone threshold (default 0.1).
        deadzone_digital : float, optional
            Digital deadzone threshold (default 0.5).

        Raises
        ------
        ValueError
            If a threshold is non-finite or outside ``[0.0, 1.0]``.
        """
        self._inputs: Dict[T, AnalogInputValue] = {}

        self._just_activated: Set[T] = set()
        self._just_deactivated: Set[T] = set()
        self._deadzone = Deadzone(validate_deadzone("deadzone", deadzone))

        self._just_activated_digital: Set[T] = set()
        self._just_deactivated_digital: Set[T] = set()
        self._deadzone_digital = Deadzone(validate_deadzone("deadzone_digital", deadzone_digital))

    @classmethod
    def from_config(cls, config: AnalogInputConfig) -> "AnalogInput[T]":
        return cls(config.deadzone, config.deadzone_digital)

    def __repr__(self) -> str:
        return (f"AnalogInput(inputs={len(self._inputs)}, deadzone={self.deadzone}, "
                f"deadzone_digital={self.deadzone_digital})")

    @property
    def deadzone(self) -> float:
        return float(self._deadzone)

    @property
    def deadzone_digital(self) -> float:
        return float(self._deadzone_digital)

    def __contains__(self, input: T) -> bool:
        return input in self._inputs

    def __len__(self) -> int:
        return len(self._inputs)

    def keys(self) -> KeysView[T]:
        """Inputs that have been set at least once."""
        return self._inputs.keys()

    def value(self, input: T) -> float:
        """
        Get the value of an analog input.

        Returns
        -------
        float
            The signed value, or ``0.0`` if the input is within the analog
            deadzone or has not been read yet.
        """
        value = self._inputs.get(input)
        if value is not None and Deadzone.from_value(value) > self._deadzone:
            return float(value)

        return 0.0

    def just_activated(self, input: T) -> Optional[float]:
        """Return the current :meth:`value` if the input just left the analog deadzone, else ``None``."""
        if input in self._just_activated:
            return self.value(input)

        return None

    def just_deactivated(self, input: T) -> bool:
        """Check if an analog input just entered the analog deadzone."""
        return input in self._just_deactivated

    def value_digital(self, input: T) -> float:
        """
        Convert an analog input to a digital value.

        Returns
        -------
        float
            ``ANALOG_MIN`` or ``ANALOG_MAX`` when the input is outside the
            digital deadzone, ``0.0`` otherwise.
        """
        value = self._inputs.get(input)
        if value is not None and Deadzone.from_value(value) > self._deadzone_digital:
            return ANALOG_MIN if float(value) < 0.0 else ANALOG_MAX

        return 0.0

    def just_activated_digital(self, input: T) -> Optional[float]:
        """Return the current :meth:`value_digital` if the input just left the digital deadzone, else ``None``."""
        if input in self._just_activated_digital:
            return self.value_digital(input)

        return None

    def just_deactivated_digital(self, input: T) -> bool:
        """Check if an analog input just entered the digital deadzone."""
        return input in self._just_deactivated_digital

    def set(self, input: T, value: AnalogInputValue) -> None:
        """
        Record a new sample for an input and recompute its edges.

        Parameters
        ----------
        input : T
            Key of the analog source.
        value : AnalogInputValue
            Normalized sample, replacing any previous one.

        Raises
        ------
        TypeError
            If ``value`` is not an :class:`AnalogInputValue`.
        """
        if not isinstance(value, AnalogInputValue):
            raise TypeError(f"[AnalogInput] Expected AnalogInputValue, got {type(value).__name__}")

        old_value = self._inputs.get(input)
        self._inputs[input] = value

        self._update_edges(
            input, value, old_value,
            float(self._deadzone), self._just_activated, self._just_deactivated
        )
        self._update_edges(
            input, value, old_value,
            float(self._deadzone_digital), self._just_activated_digital, self._just_deactivated_digital
        )

    def set_raw(self, input: T, raw: RawSample) -> None:
        """Normalize a raw integer or float sample and :meth:`set` it."""
        self.set(input, AnalogInputValue.from_raw(raw))

    def set_many(self, samples: Mapping[T, Union[AnalogInputValue, RawSample]]) -> None:
        """:meth:`set` every sample of a mapping, in iteration order."""
        for input, sample in samples.items():
            if isinstance(sample, AnalogInputValue):
                self.set(input, sample)
            else:
                self.set_raw(input, sample)

    def update(self) -> None:
        """
        Clear all edge sets, starting a new tick.

        Call exactly once per tick, after that tick's ``set`` calls. Stored
        values are kept.
        """
        self._just_activated.clear()
        self._just_deactivated.clear()
        self._just_activated_digital.clear()
        self._just_deactivated_digital.clear()

    @staticmethod
    def _update_edges(
            input: T,
            value: AnalogInputValue,
            old_value: Optional[AnalogInputValue],
            deadzone: float,
            activated: Set[T],
            deactivated: Set[T]
        ) -> None:
        new = float(value)

        if old_value is None:
            if abs(new) >= deadzone:
                activated.add(input)
                deactivated.discard(input)
            return

        old = float(old_value)

        if abs(new) < deadzone:
            activated.discard(input)
            if abs(old) >= deadzone:
                deactivated.add(input)
        else:
            deactivated.discard(input)
            # an input can pass through the whole deadzone between two samples;
            # both values then exceed it but with opposite signs
            if abs(old) < deadzone or _sign(new) != _sign(old):
                activated.add(input)
