#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Custom exceptions for manifest-x
"""


class ManifestXBaseException(Exception):
    """
    Top class for Manifest-X Exceptions
    """

    def __init__(self, msg, *args):
        super().__init__(msg, *args)


class WorkloadDefinitionError(ManifestXBaseException):
    """
    Exception when the workload definition does not validate against the workload JSON schema
    """


class MetadataError(ManifestXBaseException):
    """
    Exception raised while retrieving the template version of one of the application sources.

    :ivar str source: The kind of source that failed, i.e. stack or stack set
    :ivar str resource_name: Name of the stack / stack set
    """

    def __init__(self, msg, source: str = None, resource_name: str = None, *args):
        super().__init__(msg, *args)
        self.source = source
        self.resource_name = resource_name


class MetadataFetchError(MetadataError):
    """
    Exception when the metadata of a stack or stack set could not be retrieved
    """


class MetadataParseError(MetadataError):
    """
    Exception when the metadata document or the template version it holds is invalid
    """
