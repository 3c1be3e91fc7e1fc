"""
Analog Sample Values
====================

Normalized scalar types shared by the analog input container.

Every raw reading coming from a stick or trigger is converted into an
:class:`AnalogInputValue` before it is stored. The conversion never fails:
integer samples are scaled by the largest positive value of their width,
floating point samples are clamped, and non-finite readings collapse to ``0.0``.

Example
-------
>>> import numpy as np
>>> from analog_input.analog_value import AnalogInputValue
>>>
>>> float(AnalogInputValue.from_int(32767))
1.0
>>> float(AnalogInputValue.from_int(np.int8(-128)))
-1.0
>>> float(AnalogInputValue.from_float(float("nan")))
0.0
"""


from dataclasses import dataclass
import math
from typing import Iterable, List, Union

import numpy as np


ANALOG_MIN = -1.0
ANALOG_MAX = 1.0

DEFAULT_INT_DTYPE = np.int16

RawSample = Union[int, float, np.integer, np.floating]


def _clamp(value: float) -> float:
    return min(max(value, ANALOG_MIN), ANALOG_MAX)


@dataclass(frozen=True, order=True)
class AnalogInputValue:
    """
    A single analog sample, always held in ``[ANALOG_MIN, ANALOG_MAX]``.

    Construction normalizes the given number the same way
    :meth:`from_float` does, so no instance can exist outside the range.

    Attributes
    ----------
    value : float
        The normalized sample.
    """
    value: float = 0.0

    def __post_init__(self):
        value = float(self.value)
        object.__setattr__(self, "value", _clamp(value) if math.isfinite(value) else 0.0)

    @classmethod
    def from_int(cls, value: Union[int, np.integer], dtype=DEFAULT_INT_DTYPE) -> "AnalogInputValue":
        """
        Normalize a signed integer sample.

        Parameters
        ----------
        value : int or numpy.integer
            Raw integer reading. A numpy integer scalar carries its own width,
            which takes precedence over ``dtype``.
        dtype : numpy dtype, optional
            Integer width of plain Python ints (default ``numpy.int16``).

        Returns
        -------
        AnalogInputValue
            ``value / iinfo(dtype).max`` clamped into the analog range.
        """
        if isinstance(value, np.integer):
            dtype = value.dtype

        int_max = int(np.iinfo(dtype).max)
        value = min(max(int(value), -int_max - 1), int_max)
        return cls(_clamp(value / int_max))

    @classmethod
    def from_float(cls, value: Union[float, np.floating]) -> "AnalogInputValue":
        """Clamp a floating point sample; NaN and infinities become ``0.0``."""
        return cls(value)

    @classmethod
    def from_raw(cls, value: RawSample) -> "AnalogInputValue":
        """Dispatch to :meth:`from_int` or :meth:`from_float` by sample type."""
        if isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_)):
            return cls.from_int(value)

        return cls.from_float(value)

    @classmethod
    def from_array(
            cls,
            samples: Union[np.ndarray, Iterable[RawSample]],
            dtype=DEFAULT_INT_DTYPE
        ) -> List["AnalogInputValue"]:
        """
        Normalize a batch of raw samples.

        Integer samples are scaled the same way :meth:`from_int` scales them:
        an integer ndarray by the width of its own dtype, plain Python ints by
        the width of ``dtype``. Everything else is treated as floating point.

        Parameters
        ----------
        samples : numpy.ndarray or iterable
            Raw readings, e.g. all axes of one pad for a single tick.
        dtype : numpy dtype, optional
            Integer width of plain Python ints (default ``numpy.int16``).

        Returns
        -------
        list of AnalogInputValue
        """
        if not isinstance(samples, np.ndarray):
            samples = list(samples)
            if samples and all(isinstance(s, (int, np.integer)) and not isinstance(s, (bool, np.bool_))
                               for s in samples):
                return [cls.from_int(s, dtype) for s in samples]

        array = np.asarray(samples)

        if np.issubdtype(array.dtype, np.integer):
            scaled = array.astype(np.float64) / np.iinfo(array.dtype).max
        else:
            scaled = array.astype(np.float64)

        scaled = np.where(np.isfinite(scaled), scaled, 0.0)
        scaled = np.clip(scaled, ANALOG_MIN, ANALOG_MAX)

        return [cls(float(v)) for v in scaled.ravel()]

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True, order=True)
class Deadzone:
    """
    Nonnegative magnitude used for threshold comparisons.

    Instances are derived from a sample with :meth:`from_value`, or hold a
    configured threshold. They are never stored per input.
    """
    magnitude: float = 0.0

    @classmethod
    def from_value(cls, value: AnalogInputValue) -> "Deadzone":
        return cls(abs(value.value))

    def __float__(self) -> float:
        return self.magnitude


DEFAULT_DEADZONE = Deadzone(0.1)
DEFAULT_DEADZONE_DIGITAL = Deadzone(0.5)
