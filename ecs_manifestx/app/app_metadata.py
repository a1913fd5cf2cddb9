# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Retrieves the ``Metadata`` of the application stack and stack set templates from CloudFormation.
"""

from __future__ import annotations

from botocore.exceptions import ClientError
from compose_x_common.compose_x_common import set_else_none

from ecs_manifestx.common.logging import LOG


class CloudFormationMetadataProvider:
    """
    Fetches the templates metadata with GetTemplateSummary. Nothing is cached, every call
    makes a new API call.

    :ivar boto3.session.Session session:
    """

    def __init__(self, session):
        """
        :param boto3.session.Session session: The boto3 session for API calls
        """
        self.session = session

    def get_template_metadata(self, **kwargs) -> str:
        client = self.session.client("cloudformation")
        try:
            summary_r = client.get_template_summary(**kwargs)
        except ClientError as error:
            LOG.error(f"Failed to get the template summary for {kwargs}")
            LOG.error(error)
            raise
        return set_else_none("Metadata", summary_r, alt_value="")

    def fetch_by_stack_name(self, stack_name: str) -> str:
        """
        :param str stack_name:
        :return: The Metadata of the stack template, empty string if there is none.
        :rtype: str
        """
        return self.get_template_metadata(StackName=stack_name)

    def fetch_by_stack_set_name(self, stack_set_name: str) -> str:
        """
        :param str stack_set_name:
        :return: The Metadata of the stack set template, empty string if there is none.
        :rtype: str
        """
        return self.get_template_metadata(StackSetName=stack_set_name)
