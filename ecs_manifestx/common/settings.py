# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Module for the DeploymentContext class, which holds the settings that come from where the
manifest fragment is deployed rather than from the workload definition itself.
"""

from __future__ import annotations

from typing import Union

from compose_x_common.compose_x_common import keyisset
from troposphere import AWSHelperFn, Ref, Region

from ecs_manifestx.common.logging import LOG

LOG_GROUP_T = "LogGroup"
DEFAULT_STREAM_PREFIX = "copilot"
AWSLOGS_DRIVER = "awslogs"


class DeploymentContext:
    """
    Region, log group and stream prefix the awslogs driver of every container writes to.
    Values are either plain strings or CFN functions (Ref) resolved by the provisioning engine.

    :ivar region: awslogs-region value
    :ivar log_group: awslogs-group value
    :ivar str stream_prefix: awslogs-stream-prefix value
    :ivar str log_driver: The log driver to use.
    """

    region_arg = "RegionName"
    log_group_arg = "LogGroupName"
    stream_prefix_arg = "StreamPrefix"

    def __init__(
        self,
        region: Union[str, AWSHelperFn] = None,
        log_group: Union[str, AWSHelperFn] = None,
        stream_prefix: str = None,
        log_driver: str = AWSLOGS_DRIVER,
    ):
        self.region = region if region else Region
        self.log_group = log_group if log_group else Ref(LOG_GROUP_T)
        self.stream_prefix = stream_prefix if stream_prefix else DEFAULT_STREAM_PREFIX
        self.log_driver = log_driver

    def __repr__(self):
        return (
            f"DeploymentContext(region={self.region!r}, log_group={self.log_group!r}, "
            f"stream_prefix={self.stream_prefix!r})"
        )

    @classmethod
    def from_kwargs(cls, kwargs: dict) -> DeploymentContext:
        """
        Builds the deployment context from the CLI arguments.
        Any argument not set falls back to the CloudFormation references.

        :param dict kwargs:
        :rtype: DeploymentContext
        """
        context = cls(
            region=kwargs[cls.region_arg] if keyisset(cls.region_arg, kwargs) else None,
            log_group=kwargs[cls.log_group_arg]
            if keyisset(cls.log_group_arg, kwargs)
            else None,
            stream_prefix=kwargs[cls.stream_prefix_arg]
            if keyisset(cls.stream_prefix_arg, kwargs)
            else None,
        )
        LOG.debug(context)
        return context

    @property
    def log_options(self) -> dict:
        return {
            "awslogs-region": self.region,
            "awslogs-group": self.log_group,
            "awslogs-stream-prefix": self.stream_prefix,
        }
