"""On/off controllers: switch state and a setpoint thermostat with a deadband.

Temperatures may be in any consistent unit; the deadband is a temperature
difference in the same unit.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SwitchState(enum.Enum):
    """The on/off state of a controller or device."""

    OFF = "off"
    ON = "on"


@dataclass(frozen=True)
class SetpointThermostatInput:
    """Input to the setpoint thermostat.

    Use ``dataclasses.replace`` to derive an input with one field changed.
    """

    state: SwitchState
    temperature: float
    setpoint: float
    deadband: float


def heating(thermostat_input: SetpointThermostatInput) -> SwitchState:
    """Heating control with hysteresis.

    Turns on at or below ``setpoint - deadband`` and off at or above ``setpoint``.
    """
    state = thermostat_input.state
    temperature = thermostat_input.temperature
    setpoint = thermostat_input.setpoint
    if state is SwitchState.OFF:
        if temperature <= setpoint - thermostat_input.deadband:
            return SwitchState.ON
        return SwitchState.OFF
    if temperature >= setpoint:
        return SwitchState.OFF
    return SwitchState.ON


def cooling(thermostat_input: SetpointThermostatInput) -> SwitchState:
    """Cooling control with hysteresis.

    Turns on at or above ``setpoint + deadband`` and off at or below ``setpoint``.
    """
    state = thermostat_input.state
    temperature = thermostat_input.temperature
    setpoint = thermostat_input.setpoint
    if state is SwitchState.OFF:
        if temperature >= setpoint + thermostat_input.deadband:
            return SwitchState.ON
        return SwitchState.OFF
    if temperature <= setpoint:
        return SwitchState.OFF
    return SwitchState.ON