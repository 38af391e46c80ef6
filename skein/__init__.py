"""Composable system modelling: numeric constraints, component graphs, Euler stepping, a thermostat, step schedules and a stratified tank."""

__version__ = "0.3.0"