# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Module for the Workload class, which loads the logging and sidecars of the workload definition.
"""

from __future__ import annotations

import json
from os import path

import jsonschema
import yaml
from compose_x_common.compose_x_common import keyisset, set_else_none
from importlib_resources import files as pkg_files

from ecs_manifestx.common.logging import LOG
from ecs_manifestx.common.settings import DeploymentContext
from ecs_manifestx.ecs.container_definitions import compile_container_definitions
from ecs_manifestx.ecs.log_router import LogRouterConfiguration
from ecs_manifestx.ecs.sidecars import Sidecar
from ecs_manifestx.exceptions import WorkloadDefinitionError

WORKLOAD_SPEC_FILE = "workload.spec.json"


def load_workload_schema() -> dict:
    spec_file = pkg_files("ecs_manifestx").joinpath("specs").joinpath(WORKLOAD_SPEC_FILE)
    return json.loads(spec_file.read_text())


def validate_workload_definition(definition: dict) -> None:
    """
    Validates the workload definition against the workload JSON schema

    :param dict definition:
    :raises WorkloadDefinitionError: if the definition is not valid
    """
    try:
        jsonschema.validate(definition, load_workload_schema())
    except jsonschema.exceptions.ValidationError as error:
        LOG.error(f"Invalid workload definition: {error.message}")
        raise WorkloadDefinitionError(
            f"Invalid workload definition at {list(error.absolute_path)}: {error.message}"
        ) from error


class Workload:
    """
    Class to represent the workload logging and sidecars.

    :ivar str name:
    :ivar LogRouterConfiguration log_config: None when the workload does not use FireLens
    :ivar list[Sidecar] sidecars: in the order they are defined
    """

    def __init__(self, definition: dict):
        """
        :param dict definition: the workload definition
        :raises WorkloadDefinitionError: if the definition is not valid
        """
        if not isinstance(definition, dict):
            raise WorkloadDefinitionError(
                "The workload definition must be a mapping. Got", type(definition)
            )
        validate_workload_definition(definition)
        self.name = set_else_none("name", definition)
        self.log_config = (
            LogRouterConfiguration.from_definition(definition["logging"])
            if keyisset("logging", definition)
            else None
        )
        self.sidecars = [
            Sidecar.from_definition(sidecar_name, sidecar_definition)
            for sidecar_name, sidecar_definition in set_else_none(
                "sidecars", definition, alt_value={}
            ).items()
        ]
        LOG.debug(
            f"{self.name} - {len(self.sidecars)} sidecars, "
            f"log router {'enabled' if self.log_config else 'disabled'}"
        )

    def __repr__(self):
        return f"Workload({self.name})"

    def container_definitions(self, context: DeploymentContext = None) -> list:
        """
        :param DeploymentContext context:
        :rtype: list[troposphere.ecs.ContainerDefinition]
        """
        return compile_container_definitions(self.log_config, self.sidecars, context)


def load_workload_file(file_path: str) -> Workload:
    """
    Loads the workload from a YAML file.

    :param str file_path:
    :rtype: Workload
    :raises WorkloadDefinitionError: if the file content is not valid
    """
    with open(path.abspath(file_path)) as workload_fd:
        try:
            content = yaml.safe_load(workload_fd.read())
        except yaml.YAMLError as error:
            raise WorkloadDefinitionError(
                f"Failed to parse workload file {file_path}: {error}"
            ) from error
    return Workload(content if content is not None else {})
