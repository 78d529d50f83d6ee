"""svarog: hit-dice health and damage resolution.

A creature's health is an ordered sequence of hit dice. Health actions
(``Chip``, ``Heal``, ``Drain``, ``Break``, ``Mend``, ``Shatter``, ``Fortify``,
...) are resolved by pure systems that return the new health together with the
ordered list of responses the dice produced::

    from svarog import Chip, Create, Health, health_system

    health, _ = health_system(Health(), Create(6))
    health, _ = health_system(health, Create(6))
    health, responses = health_system(health, Chip(10))
    # responses == [ChipResponse(1, 4), ChipResponse(0, 0)]

For several creatures, keep them in a :class:`~svarog.state.State` and drive
them with :func:`~svarog.step.step`.

Applications set up logging and read creature templates from ``config.yaml``
through :mod:`svarog.config`::

    from svarog import CONFIG, State, configure_logging
    from svarog.templates import add_creature

    configure_logging(CONFIG)
    state, goblin = add_creature(State(), CONFIG.templates["goblin"])
"""

from svarog.actions import (
    AddStatus,
    Break,
    Chip,
    Create,
    Drain,
    Fortify,
    Heal,
    HealthAction,
    Mend,
    RemoveStatus,
    Shatter,
)
from svarog.components import Health, HitDie, Value
from svarog.config import CONFIG, Config, configure_logging, load_config
from svarog.responses import (
    BreakResponse,
    ChipResponse,
    CreateResponse,
    DrainResponse,
    FortifiedResponse,
    HealResponse,
    HealthActionResponse,
    MendResponse,
    NoResponse,
    RecoveryResponse,
    ShatterResponse,
)
from svarog.state import State
from svarog.step import step
from svarog.systems.health import health_system
from svarog.systems.hit_die import hit_die_system

__all__ = [
    # Actions
    "AddStatus",
    "Break",
    "Chip",
    "Create",
    "Drain",
    "Fortify",
    "Heal",
    "HealthAction",
    "Mend",
    "RemoveStatus",
    "Shatter",
    # Components
    "Health",
    "HitDie",
    "Value",
    # Responses
    "BreakResponse",
    "ChipResponse",
    "CreateResponse",
    "DrainResponse",
    "FortifiedResponse",
    "HealResponse",
    "HealthActionResponse",
    "MendResponse",
    "NoResponse",
    "RecoveryResponse",
    "ShatterResponse",
    # Configuration
    "CONFIG",
    "Config",
    "configure_logging",
    "load_config",
    # Systems
    "State",
    "health_system",
    "hit_die_system",
    "step",
]
