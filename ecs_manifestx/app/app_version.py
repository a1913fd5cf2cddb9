# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Module to figure out the template version of the application.

The application is deployed both as a CloudFormation stack and as a stack set, which get updated
independently. Each template stores the version it was generated with in its Metadata, under
``TemplateVersion``. The version of the application is the lowest of the two, so that features
are only used once both have been upgraded.

Templates created before versioning have no TemplateVersion: these are given the
legacy version ``v0.0.0``, lower than any other version.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable

import semver
import yaml

from ecs_manifestx.app.app_params import (
    APP_STACK_SET_SOURCE,
    APP_STACK_SOURCE,
    LEGACY_APP_TEMPLATE_VERSION,
    TEMPLATE_VERSION_KEY,
    name_for_app_stack,
    name_for_app_stack_set,
)
from ecs_manifestx.common.logging import LOG
from ecs_manifestx.exceptions import MetadataFetchError, MetadataParseError


def parse_template_version(version: str) -> semver.Version:
    """
    Parses the template version, with or without the ``v`` prefix.

    :param str version:
    :rtype: semver.Version
    :raises ValueError: if not a valid semantic version
    """
    if version[:1] in ["v", "V"]:
        version = version[1:]
    return semver.Version.parse(version)


def compare_template_versions(left: str, right: str) -> int:
    """
    Compares two template versions following semantic versioning precedence.
    The legacy version is lower than any other.

    :return: -1 if left is lower than right, 0 if equal, 1 otherwise
    :rtype: int
    """
    if left == right:
        return 0
    if left == LEGACY_APP_TEMPLATE_VERSION:
        return -1
    if right == LEGACY_APP_TEMPLATE_VERSION:
        return 1
    return parse_template_version(left).compare(parse_template_version(right))


def min_template_version(versions: list) -> str:
    """
    :param list[str] versions:
    :return: The lowest version. For equal versions, the first one in the list.
    :rtype: str
    """
    return reduce(
        lambda lowest, version: version
        if compare_template_versions(version, lowest) < 0
        else lowest,
        versions,
    )


def extract_template_version(
    document: str, source: str = None, resource_name: str = None
) -> str:
    """
    Extracts TemplateVersion from the template metadata.

    :param str document: The template Metadata, YAML or JSON
    :param str source: The kind of source the document comes from, for errors
    :param str resource_name: Name of the stack / stack set the document comes from, for errors
    :return: The template version, the legacy version if not set.
    :rtype: str
    :raises MetadataParseError: If the document or the version are invalid.
    """
    try:
        metadata = yaml.safe_load(document) if document else None
    except yaml.YAMLError as error:
        raise MetadataParseError(
            f"Failed to parse the metadata of {source} {resource_name}: {error}",
            source,
            resource_name,
        ) from error
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise MetadataParseError(
            f"Metadata of {source} {resource_name} must be a mapping. Got {type(metadata)}",
            source,
            resource_name,
        )
    version = metadata.get(TEMPLATE_VERSION_KEY)
    if version is None or version == "":
        LOG.debug(
            f"No {TEMPLATE_VERSION_KEY} for {source} {resource_name}. "
            f"Using {LEGACY_APP_TEMPLATE_VERSION}"
        )
        return LEGACY_APP_TEMPLATE_VERSION
    version = str(version)
    try:
        parse_template_version(version)
    except ValueError as error:
        raise MetadataParseError(
            f"{TEMPLATE_VERSION_KEY} {version} of {source} {resource_name} "
            "is not a valid semantic version",
            source,
            resource_name,
        ) from error
    return version


class MetadataSource:
    """
    One of the deployed representations of the application

    :ivar str source: The kind of source, i.e. stack
    :ivar str name: Name of the CFN resource
    :ivar fetch: function returning the Metadata of the resource template, given its name.
    """

    def __init__(self, source: str, name: str, fetch: Callable[[str], str]):
        self.source = source
        self.name = name
        self.fetch = fetch

    def __repr__(self):
        return f"{self.source} {self.name}"

    def get_version(self) -> str:
        try:
            document = self.fetch(self.name)
        except Exception as error:
            raise MetadataFetchError(
                f"Failed to get metadata for app {self.source} {self.name}: {error}",
                self.source,
                self.name,
            ) from error
        return extract_template_version(
            document, source=self.source, resource_name=self.name
        )


class AppVersionReconciler:
    """
    Class to get the version of the application from its stack and stack set.

    :ivar str app_name:
    :ivar provider: object exposing ``fetch_by_stack_name`` and ``fetch_by_stack_set_name``
    """

    def __init__(self, app_name: str, provider):
        self.app_name = app_name
        self.provider = provider

    @property
    def sources(self) -> list:
        return [
            MetadataSource(
                APP_STACK_SOURCE,
                name_for_app_stack(self.app_name),
                self.provider.fetch_by_stack_name,
            ),
            MetadataSource(
                APP_STACK_SET_SOURCE,
                name_for_app_stack_set(self.app_name),
                self.provider.fetch_by_stack_set_name,
            ),
        ]

    def version(self) -> str:
        """
        :return: the lowest template version across the application sources
        :rtype: str
        :raises MetadataFetchError: if the metadata of any source could not be retrieved
        :raises MetadataParseError: if the metadata of any source is invalid
        """
        versions = [source.get_version() for source in self.sources]
        app_version = min_template_version(versions)
        LOG.info(f"{self.app_name} - versions {versions}, app version {app_version}")
        return app_version


def reconcile_app_version(app_name: str, provider) -> str:
    return AppVersionReconciler(app_name, provider).version()
