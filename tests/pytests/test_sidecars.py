#  -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille<john@compose-x.io>

from pytest import raises

from ecs_manifestx.ecs.ecs_params import DEFAULT_FLUENTBIT_IMAGE
from ecs_manifestx.ecs.log_router import LogRouterConfiguration
from ecs_manifestx.ecs.sidecars import MountPoint, Sidecar, parse_port
from ecs_manifestx.exceptions import WorkloadDefinitionError


def test_parse_port():
    assert parse_port(2000) == (2000, None)
    assert parse_port("2000") == (2000, None)
    assert parse_port("2000/udp") == (2000, "udp")
    assert parse_port("80/TCP") == (80, "tcp")
    with raises(WorkloadDefinitionError):
        parse_port("http")
    with raises(WorkloadDefinitionError):
        parse_port("0")
    with raises(WorkloadDefinitionError):
        parse_port(70000)
    with raises(WorkloadDefinitionError):
        parse_port(True)


def test_sidecar_from_definition():
    sidecar = Sidecar.from_definition(
        "xray",
        {
            "image": "public.ecr.aws/xray/aws-xray-daemon",
            "port": "2000/udp",
            "essential": False,
            "credentialsParameter": "arn:aws:secretsmanager:eu-west-1:000000000000:secret:creds",
            "variables": {"AWS_REGION": "eu-west-1"},
            "secrets": {"TOKEN": "/app/token"},
            "mount_points": [
                {"source_volume": "efs", "path": "/data"},
                {"source_volume": "logs", "path": "/logs", "read_only": False},
            ],
        },
    )
    assert sidecar.name == "xray"
    assert sidecar.port == 2000
    assert sidecar.protocol == "udp"
    assert sidecar.essential is False
    assert sidecar.variables == {"AWS_REGION": "eu-west-1"}
    assert sidecar.secrets == {"TOKEN": "/app/token"}
    assert sidecar.mount_points == [
        MountPoint("efs", "/data", True),
        MountPoint("logs", "/logs", False),
    ]
    assert sidecar.credentials_parameter.endswith(":secret:creds")


def test_sidecar_defaults():
    sidecar = Sidecar.from_definition("nginx", {"image": "nginx"})
    assert sidecar.essential is None
    assert sidecar.port is None
    assert sidecar.protocol is None
    assert sidecar.variables == {}
    assert sidecar.secrets == {}
    assert sidecar.mount_points == []
    assert sidecar.credentials_parameter is None


def test_sidecar_does_not_share_inputs():
    variables = {"KEY": "value"}
    sidecar = Sidecar("nginx", "nginx", variables=variables)
    variables["OTHER"] = "value"
    assert sidecar.variables == {"KEY": "value"}


def test_log_router_from_definition():
    log_config = LogRouterConfiguration.from_definition({})
    assert log_config.image == DEFAULT_FLUENTBIT_IMAGE
    assert log_config.enable_metadata is True
    assert log_config.config_file is None
    log_config = LogRouterConfiguration.from_definition(
        {"image": "fluentbit:custom", "enableMetadata": False, "configFilePath": "/e.conf"}
    )
    assert log_config.image == "fluentbit:custom"
    assert log_config.enable_metadata is False
    assert log_config.config_file == "/e.conf"
