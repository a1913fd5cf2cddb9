# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Sidecars defined by the user, to run alongside the main container of the workload.
"""

from __future__ import annotations

import re

from compose_x_common.compose_x_common import keypresent, set_else_none

from ecs_manifestx.exceptions import WorkloadDefinitionError

PORT_RE = re.compile(r"^(?P<port>\d+)(?:/(?P<protocol>[a-zA-Z]+))?$")


def parse_port(port) -> tuple:
    """
    Parses the sidecar port, given as an int or as ``<port>[/<protocol>]``

    :param port:
    :return: the port and the protocol, None if not set
    :rtype: tuple[int, str]
    :raises WorkloadDefinitionError: if the port is not valid
    """
    if isinstance(port, bool):
        raise WorkloadDefinitionError(f"Invalid sidecar port {port}")
    if isinstance(port, int):
        port_number, protocol = port, None
    else:
        parts = PORT_RE.match(str(port).strip())
        if not parts:
            raise WorkloadDefinitionError(
                f"Invalid sidecar port {port}. Expected <port> or <port>/<protocol>"
            )
        port_number = int(parts.group("port"))
        protocol = parts.group("protocol").lower() if parts.group("protocol") else None
    if not 0 < port_number < 65536:
        raise WorkloadDefinitionError(
            f"Invalid sidecar port {port}. Must be between 1 and 65535"
        )
    return port_number, protocol


class MountPoint:
    """
    A volume mounted into the sidecar.
    """

    def __init__(self, source_volume: str, container_path: str, read_only: bool = True):
        self.source_volume = source_volume
        self.container_path = container_path
        self.read_only = read_only

    def __repr__(self):
        return f"MountPoint({self.source_volume}:{self.container_path}:{'ro' if self.read_only else 'rw'})"

    def __eq__(self, other):
        if not isinstance(other, MountPoint):
            return NotImplemented
        return (self.source_volume, self.container_path, self.read_only) == (
            other.source_volume,
            other.container_path,
            other.read_only,
        )

    @classmethod
    def from_definition(cls, definition: dict) -> MountPoint:
        return cls(
            source_volume=set_else_none("source_volume", definition),
            container_path=set_else_none("path", definition),
            read_only=definition["read_only"]
            if keypresent("read_only", definition)
            else True,
        )


class Sidecar:
    """
    Class to represent a user defined sidecar container

    :ivar str name: Name of the container, unique within the task definition
    :ivar str image: Image of the container
    :ivar bool essential: Whether the container is essential, None when left to ECS default
    :ivar int port: Container port
    :ivar str protocol: Protocol of the container port
    :ivar dict variables: Environment variables
    :ivar dict secrets: Secrets, name to the secret ARN / SSM parameter
    :ivar list[MountPoint] mount_points:
    :ivar str credentials_parameter: Secret ARN for the private registry credentials
    """

    def __init__(
        self,
        name: str,
        image: str,
        essential: bool = None,
        port: int = None,
        protocol: str = None,
        variables: dict = None,
        secrets: dict = None,
        mount_points: list = None,
        credentials_parameter: str = None,
    ):
        self.name = name
        self.image = image
        self.essential = essential
        self.port = port
        self.protocol = protocol
        self.variables = dict(variables) if variables else {}
        self.secrets = dict(secrets) if secrets else {}
        self.mount_points = list(mount_points) if mount_points else []
        self.credentials_parameter = credentials_parameter

    def __repr__(self):
        return f"Sidecar({self.name}, {self.image})"

    @classmethod
    def from_definition(cls, name: str, definition: dict) -> Sidecar:
        """
        Creates the sidecar from its manifest definition

        :param str name:
        :param dict definition:
        :rtype: Sidecar
        """
        port, protocol = None, None
        if keypresent("port", definition) and definition["port"] is not None:
            port, protocol = parse_port(definition["port"])
        return cls(
            name=str(name),
            image=set_else_none("image", definition),
            essential=definition["essential"]
            if keypresent("essential", definition)
            else None,
            port=port,
            protocol=protocol,
            variables=set_else_none("variables", definition, alt_value={}),
            secrets=set_else_none("secrets", definition, alt_value={}),
            mount_points=[
                MountPoint.from_definition(mount_point)
                for mount_point in set_else_none(
                    "mount_points", definition, alt_value=[]
                )
            ],
            credentials_parameter=set_else_none("credentialsParameter", definition),
        )
