# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
boto3 session for the API calls made to describe the application.
"""

import boto3
from botocore.exceptions import ClientError
from compose_x_common.aws import get_assume_role_session, validate_iam_role_arn

from ecs_manifestx.common.logging import LOG

DESCRIBE_SESSION_NAME = "ManifestX@Describe"


def define_session(region_name=None, role_arn=None, profile_name=None):
    """
    Creates the boto3 session. When ``role_arn`` is set, the session uses that role instead,
    to describe applications in another account.

    :param str region_name:
    :param str role_arn:
    :param str profile_name:
    :rtype: boto3.session.Session
    :raises ClientError: if the role could not be assumed
    """
    session = boto3.session.Session(region_name=region_name, profile_name=profile_name)
    if not role_arn:
        return session
    validate_iam_role_arn(role_arn)
    try:
        return get_assume_role_session(
            session, role_arn, session_name=DESCRIBE_SESSION_NAME, region=region_name
        )
    except ClientError:
        LOG.error(f"Failed to use the Role ARN {role_arn}")
        raise
