import os
import configparser
import logging
from typing import List, Optional

import boto3

logger = logging.getLogger(__name__)


def get_available_aws_profiles() -> List[str]:
    """Retrieve available AWS profiles from ~/.aws/credentials and ~/.aws/config."""
    profiles = []
    aws_credentials_path = os.path.expanduser("~/.aws/credentials")
    aws_config_path = os.path.expanduser("~/.aws/config")

    if os.path.exists(aws_credentials_path):
        config = configparser.ConfigParser()
        config.read(aws_credentials_path)
        profiles.extend(config.sections())

    if os.path.exists(aws_config_path):
        config = configparser.ConfigParser()
        config.read(aws_config_path)
        for section in config.sections():
            if section.startswith("profile "):
                profile_name = section.replace("profile ", "")
                if profile_name not in profiles:
                    profiles.append(profile_name)

    return profiles if profiles else ["default"]


def build_session(profile: Optional[str] = None) -> boto3.Session:
    """Session for the given profile. 'default' and None use the default credential chain."""
    session_kwargs = {}
    if profile and profile != "default":
        session_kwargs["profile_name"] = profile
    logger.debug(f"Using AWS profile: {profile or 'default'}")
    return boto3.Session(**session_kwargs)


def build_client(session: boto3.Session, service: str, region: Optional[str] = None,
                 endpoint_url: Optional[str] = None):
    client_kwargs = {}
    if region:
        client_kwargs["region_name"] = region
    if endpoint_url:
        client_kwargs["endpoint_url"] = endpoint_url
    return session.client(service, **client_kwargs)
