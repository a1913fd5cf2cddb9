#  -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille<john@compose-x.io>

import json

from ecs_manifestx.ecs.field_renderer import (
    render_bool,
    render_env_value,
    render_mount_points,
)
from ecs_manifestx.ecs.sidecars import MountPoint


def test_render_env_value():
    assert render_env_value("value") == "value"
    assert render_env_value('quoted "value"') == 'quoted "value"'
    assert render_env_value(True) == "true"
    assert render_env_value(False) == "false"
    assert render_env_value(8080) == "8080"
    assert render_env_value(None) == ""
    assert render_bool(1) == "true"


def test_render_mount_points():
    mount_points = [
        MountPoint("efs", "/var/www", True),
        MountPoint("scratch", "/tmp/scratch", False),
    ]
    rendered = render_mount_points(mount_points)
    assert rendered == (
        '[{"sourceVolume":"efs","readOnly":true,"containerPath":"/var/www"},'
        '{"sourceVolume":"scratch","readOnly":false,"containerPath":"/tmp/scratch"}]'
    )
    assert json.loads(rendered) == [
        {"sourceVolume": "efs", "readOnly": True, "containerPath": "/var/www"},
        {"sourceVolume": "scratch", "readOnly": False, "containerPath": "/tmp/scratch"},
    ]
    assert render_mount_points([]) == "[]"
