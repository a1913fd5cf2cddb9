# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
FireLens log router settings. When the workload defines ``logging``, a fluentbit container
is added first to the task definition to route the containers logs.
"""

from __future__ import annotations

from compose_x_common.compose_x_common import keypresent, set_else_none

from ecs_manifestx.ecs.ecs_params import DEFAULT_FLUENTBIT_IMAGE


class LogRouterConfiguration:
    """
    :ivar str image: Image of the log router
    :ivar bool enable_metadata: Whether to add the ECS metadata to the log records
    :ivar str config_file: Path, in the image, to an extra fluentbit configuration file
    """

    def __init__(
        self,
        image: str = DEFAULT_FLUENTBIT_IMAGE,
        enable_metadata: bool = True,
        config_file: str = None,
    ):
        self.image = image
        self.enable_metadata = enable_metadata
        self.config_file = config_file

    def __repr__(self):
        return f"LogRouterConfiguration({self.image})"

    @classmethod
    def from_definition(cls, definition: dict) -> LogRouterConfiguration:
        return cls(
            image=set_else_none("image", definition, alt_value=DEFAULT_FLUENTBIT_IMAGE),
            enable_metadata=definition["enableMetadata"]
            if keypresent("enableMetadata", definition)
            else True,
            config_file=set_else_none("configFilePath", definition),
        )
