"""Keyboard teleoperation: arrow keys turned into velocity commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

KEYCODE_RIGHT = 0x43
KEYCODE_LEFT = 0x44
KEYCODE_UP = 0x41
KEYCODE_DOWN = 0x42
KEYCODE_QUIT = 0x71

DEFAULT_LINEAR_SCALE = 2.0
DEFAULT_ANGULAR_SCALE = 2.0
DEFAULT_CMD_VEL_TOPIC = "euroc5/cmd_vel"

Key = Union[int, str, bytes]

_DIRECTIONS = {
    KEYCODE_LEFT: (0.0, 1.0),
    KEYCODE_RIGHT: (0.0, -1.0),
    KEYCODE_UP: (1.0, 0.0),
    KEYCODE_DOWN: (-1.0, 0.0),
}


@dataclass(frozen=True)
class Twist:
    """A velocity command: forward speed and yaw rate."""

    linear_x: float = 0.0
    angular_z: float = 0.0


def _key_code(key: Key) -> int:
    if isinstance(key, int):
        return key
    if len(key) != 1:
        raise ValueError(f"expected a single key, got {key!r}")
    return key[0] if isinstance(key, bytes) else ord(key)


def key_to_twist(
    key: Key,
    linear_scale: float = DEFAULT_LINEAR_SCALE,
    angular_scale: float = DEFAULT_ANGULAR_SCALE,
) -> Optional[Twist]:
    """The command for one key, or None if the key is not an arrow key."""
    direction = _DIRECTIONS.get(_key_code(key))
    if direction is None:
        return None
    linear, angular = direction
    return Twist(linear_x=linear_scale * linear, angular_z=angular_scale * angular)


def teleop_commands(
    keys: Iterable[Key],
    linear_scale: float = DEFAULT_LINEAR_SCALE,
    angular_scale: float = DEFAULT_ANGULAR_SCALE,
) -> Iterator[Twist]:
    """Yield a command for every arrow key in ``keys``; other keys are ignored."""
    for key in keys:
        twist = key_to_twist(key, linear_scale, angular_scale)
        if twist is not None:
            yield twist