# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Formatting of the values set in the container definitions.
ECS wants strings for the environment values and the log driver options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ecs_manifestx.ecs.sidecars import MountPoint

import json


def render_bool(value: bool) -> str:
    return "true" if value else "false"


def render_env_value(value) -> str:
    """
    Renders an environment variable value as the string ECS expects.
    YAML gives us booleans and numbers for unquoted values, which we render back the way
    they were written.

    :param value: the variable value
    :rtype: str
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return render_bool(value)
    return str(value)


def mount_points_to_list(mount_points: list[MountPoint]) -> list[dict]:
    return [
        {
            "sourceVolume": mount_point.source_volume,
            "readOnly": mount_point.read_only,
            "containerPath": mount_point.container_path,
        }
        for mount_point in mount_points
    ]


def render_mount_points(mount_points: list[MountPoint]) -> str:
    """
    Serializes the mount points into a compact JSON string, set as an environment variable value.

    >>> from ecs_manifestx.ecs.sidecars import MountPoint
    >>> render_mount_points([MountPoint("efs", "/var/www", True)])
    '[{"sourceVolume":"efs","readOnly":true,"containerPath":"/var/www"}]'

    :param list[MountPoint] mount_points:
    :rtype: str
    """
    return json.dumps(mount_points_to_list(mount_points), separators=(",", ":"))
