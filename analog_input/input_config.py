from dataclasses import dataclass, fields
import math
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from analog_input.analog_value import DEFAULT_DEADZONE, DEFAULT_DEADZONE_DIGITAL


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config" / "analog_input.yaml"


def validate_deadzone(name: str, deadzone: float) -> float:
    """
    Check that a threshold is a finite magnitude inside ``[0.0, 1.0]``.

    Returns
    -------
    float
        The threshold as a float.

    Raises
    ------
    ValueError
        If the threshold is non-finite or out of range.
    """
    deadzone = float(deadzone)
    if not math.isfinite(deadzone) or not 0.0 <= deadzone <= 1.0:
        raise ValueError(f"[AnalogInput] {name} must be a finite value in [0.0, 1.0], got {deadzone}")

    return deadzone


@dataclass
class AnalogInputConfig:
    """
    Deadzone thresholds for an analog input container.

    Attributes
    ----------
    deadzone : float
        Magnitude below which a sample reads as ``0.0`` (default 0.1).
    deadzone_digital : float
        Magnitude above which a sample reads as fully on (default 0.5).
    """
    deadzone: float = float(DEFAULT_DEADZONE)
    deadzone_digital: float = float(DEFAULT_DEADZONE_DIGITAL)

    def validate(self) -> "AnalogInputConfig":
        self.deadzone = validate_deadzone("deadzone", self.deadzone)
        self.deadzone_digital = validate_deadzone("deadzone_digital", self.deadzone_digital)
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalogInputConfig":
        """
        Build a validated config from a mapping.

        Unknown keys are reported and ignored; missing keys keep their defaults.
        """
        known = {f.name for f in fields(cls)}

        for key in data:
            if key not in known:
                print(f"[AnalogInputConfig] Ignoring unknown key '{key}'")

        return cls(**{k: v for k, v in data.items() if k in known}).validate()

    @classmethod
    def from_yaml(
            cls,
            path: Union[str, Path] = DEFAULT_CONFIG_PATH,
            section: str = "analog_input"
        ) -> "AnalogInputConfig":
        """
        Load a config from a YAML file.

        Parameters
        ----------
        path : str or Path, optional
            YAML file to read (defaults to the bundled ``config/analog_input.yaml``).
        section : str, optional
            Top-level key holding the thresholds.

        Returns
        -------
        AnalogInputConfig

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist.
        KeyError
            If ``section`` is missing from the document.
        ValueError
            If a threshold is invalid.
        """
        with open(path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

        if section not in config_data:
            raise KeyError(f"[AnalogInputConfig] Section '{section}' not found in {path}")

        config = cls.from_dict(config_data[section] or {})
        print(f"[AnalogInputConfig] Loaded deadzone={config.deadzone}, "
              f"deadzone_digital={config.deadzone_digital} from {path}")

        return config
