from enum import Enum


class AnalogSignal(Enum):
    """
    Enumeration of the common analog sources on a gamepad.

    Members can be used directly as keys of an
    :class:`~analog_input.analog_input.AnalogInput` container. Any other
    hashable value (strings, axis indices, tuples of device id and axis)
    works just as well.

    Members
    -------
    - LEFT_STICK_X, LEFT_STICK_Y, RIGHT_STICK_X, RIGHT_STICK_Y : Stick axes
    - LEFT_TRIGGER, RIGHT_TRIGGER : Analog triggers
    """
    LEFT_STICK_X = "lx"
    LEFT_STICK_Y = "ly"
    RIGHT_STICK_X = "rx"
    RIGHT_STICK_Y = "ry"

    LEFT_TRIGGER = "l2"
    RIGHT_TRIGGER = "r2"

    @property
    def is_trigger(self) -> bool:
        """``True`` for triggers, which only report the positive half of the range."""
        return self in (AnalogSignal.LEFT_TRIGGER, AnalogSignal.RIGHT_TRIGGER)
