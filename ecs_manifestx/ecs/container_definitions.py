# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Compiles the log router and the sidecars of a workload into the list of ECS container definitions
that gets embedded into the task definition of the workload.

Every container definition lists its properties in the same order, whichever are set:
Name, Image, Essential, PortMappings, Environment, Secrets, LogConfiguration,
RepositoryCredentials, MountPoints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ecs_manifestx.ecs.log_router import LogRouterConfiguration
    from ecs_manifestx.ecs.sidecars import Sidecar

import json

import yaml
from cfn_flip.yaml_dumper import LongCleanDumper
from troposphere.ecs import (
    ContainerDefinition,
    Environment,
    FirelensConfiguration,
    LogConfiguration,
)
from troposphere.ecs import MountPoint as EcsMountPoint
from troposphere.ecs import PortMapping, RepositoryCredentials, Secret

from ecs_manifestx.common.logging import LOG
from ecs_manifestx.common.settings import DeploymentContext
from ecs_manifestx.ecs.ecs_params import (
    CONFIG_FILE_TYPE_OPTION,
    CONFIG_FILE_VALUE_OPTION,
    ENABLE_METADATA_OPTION,
    FIRELENS_CONFIG_FILE_TYPE,
    FIRELENS_ROUTER_NAME,
    FIRELENS_TYPE,
    MOUNT_POINTS_ENV_VAR,
)
from ecs_manifestx.ecs.field_renderer import (
    render_bool,
    render_env_value,
    render_mount_points,
)

ALLOWED_FORMATS = ["yaml", "json"]


def define_log_configuration(context: DeploymentContext) -> LogConfiguration:
    return LogConfiguration(
        LogDriver=context.log_driver,
        Options=context.log_options,
    )


def define_log_router(
    log_config: LogRouterConfiguration, context: DeploymentContext
) -> ContainerDefinition:
    """
    Creates the FireLens log router container definition

    :param LogRouterConfiguration log_config:
    :param DeploymentContext context:
    :rtype: troposphere.ecs.ContainerDefinition
    """
    options = {ENABLE_METADATA_OPTION: render_bool(log_config.enable_metadata)}
    if log_config.config_file:
        options[CONFIG_FILE_TYPE_OPTION] = FIRELENS_CONFIG_FILE_TYPE
        options[CONFIG_FILE_VALUE_OPTION] = log_config.config_file
    return ContainerDefinition(
        Name=FIRELENS_ROUTER_NAME,
        Image=log_config.image if log_config.image else "",
        FirelensConfiguration=FirelensConfiguration(Type=FIRELENS_TYPE, Options=options),
        LogConfiguration=define_log_configuration(context),
    )


def define_sidecar_environment(sidecar: Sidecar) -> list:
    """
    Environment variables of the sidecar, sorted by name. When the sidecar has mount points,
    they are added as a JSON list to the ``COPILOT_MOUNT_POINTS`` variable, last.

    :param Sidecar sidecar:
    :return: list of Environment
    :rtype: list[troposphere.ecs.Environment]
    """
    env_vars = [
        Environment(Name=str(name), Value=render_env_value(value))
        for name, value in sorted(sidecar.variables.items(), key=lambda var: str(var[0]))
    ]
    if sidecar.mount_points:
        env_vars.append(
            Environment(
                Name=MOUNT_POINTS_ENV_VAR,
                Value=render_mount_points(sidecar.mount_points),
            )
        )
    return env_vars


def define_sidecar_mount_points(sidecar: Sidecar) -> list:
    mount_points = []
    for mount_point in sidecar.mount_points:
        props = {}
        if mount_point.source_volume is not None:
            props["SourceVolume"] = mount_point.source_volume
        if mount_point.read_only is not None:
            props["ReadOnly"] = mount_point.read_only
        if mount_point.container_path is not None:
            props["ContainerPath"] = mount_point.container_path
        mount_points.append(EcsMountPoint(**props))
    return mount_points


def define_sidecar(sidecar: Sidecar, context: DeploymentContext) -> ContainerDefinition:
    """
    Creates the container definition for a sidecar. Optional properties are only set when
    the sidecar defines them.

    :param Sidecar sidecar:
    :param DeploymentContext context:
    :rtype: troposphere.ecs.ContainerDefinition
    """
    if not sidecar.name or not sidecar.image:
        LOG.warning(
            f"Sidecar {sidecar.name!r} has no name or no image. "
            "The container definition will not deploy."
        )
    props = {
        "Name": str(sidecar.name) if sidecar.name is not None else "",
        "Image": str(sidecar.image) if sidecar.image is not None else "",
    }
    if sidecar.essential is not None:
        props["Essential"] = sidecar.essential
    if sidecar.port:
        port_mapping = {"ContainerPort": sidecar.port}
        if sidecar.protocol:
            port_mapping["Protocol"] = sidecar.protocol
        props["PortMappings"] = [PortMapping(**port_mapping)]
    if sidecar.variables or sidecar.mount_points:
        props["Environment"] = define_sidecar_environment(sidecar)
    if sidecar.secrets:
        props["Secrets"] = [
            Secret(Name=str(name), ValueFrom=str(value_from))
            for name, value_from in sorted(
                sidecar.secrets.items(), key=lambda secret: str(secret[0])
            )
        ]
    props["LogConfiguration"] = define_log_configuration(context)
    if sidecar.credentials_parameter:
        props["RepositoryCredentials"] = RepositoryCredentials(
            CredentialsParameter=sidecar.credentials_parameter
        )
    if sidecar.mount_points:
        props["MountPoints"] = define_sidecar_mount_points(sidecar)
    return ContainerDefinition(**props)


def compile_container_definitions(
    log_config: LogRouterConfiguration = None,
    sidecars: list = None,
    context: DeploymentContext = None,
) -> list:
    """
    Compiles the log router, if any, and the sidecars, in the order given, into container definitions.

    :param LogRouterConfiguration log_config: The log router settings. No log router when None.
    :param list[Sidecar] sidecars:
    :param DeploymentContext context: region, log group and stream prefix for awslogs.
    :return: the container definitions, log router first.
    :rtype: list[troposphere.ecs.ContainerDefinition]
    """
    if context is None:
        context = DeploymentContext()
    definitions = []
    if log_config is not None:
        definitions.append(define_log_router(log_config, context))
    for sidecar in sidecars if sidecars else []:
        definitions.append(define_sidecar(sidecar, context))
    LOG.debug(f"Compiled {len(definitions)} container definitions")
    return definitions


def to_manifest(definitions: list) -> list:
    """
    :param list[troposphere.ecs.ContainerDefinition] definitions:
    :return: The container definitions as dicts, ready to be embedded in a template.
    :rtype: list[dict]
    """
    return [definition.to_dict() for definition in definitions]


def render_manifest(definitions: list, output_format: str = "yaml") -> str:
    """
    Renders the container definitions into the given format, keeping the properties order.

    :param list[troposphere.ecs.ContainerDefinition] definitions:
    :param str output_format: yaml or json
    :rtype: str
    """
    if output_format not in ALLOWED_FORMATS:
        raise ValueError(
            "output_format must be one of", ALLOWED_FORMATS, "Got", output_format
        )
    manifest = to_manifest(definitions)
    if output_format == "json":
        return json.dumps(manifest, indent=4)
    return yaml.dump(
        manifest, Dumper=LongCleanDumper, default_flow_style=False, sort_keys=False
    )
