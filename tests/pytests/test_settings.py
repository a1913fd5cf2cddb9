#  -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille<john@compose-x.io>

from troposphere import Ref

from ecs_manifestx.common.settings import DeploymentContext


def test_default_deployment_context():
    context = DeploymentContext.from_kwargs({})
    assert isinstance(context.region, Ref)
    assert context.region.to_dict() == {"Ref": "AWS::Region"}
    assert context.log_group.to_dict() == {"Ref": "LogGroup"}
    assert context.stream_prefix == "copilot"
    assert context.log_driver == "awslogs"


def test_deployment_context_from_kwargs():
    context = DeploymentContext.from_kwargs(
        {
            DeploymentContext.region_arg: "eu-west-1",
            DeploymentContext.log_group_arg: "/ecs/app",
            DeploymentContext.stream_prefix_arg: None,
        }
    )
    assert context.log_options == {
        "awslogs-region": "eu-west-1",
        "awslogs-group": "/ecs/app",
        "awslogs-stream-prefix": "copilot",
    }
