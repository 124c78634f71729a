import logging
from dataclasses import dataclass, field
from os import environ as env
from typing import List, Optional

import yaml

from s3_signer.exceptions import ConfigurationError

__all__ = [
    "logger",
    "configure_logger",
    "ConfigS3",
    "ConfigS3SignerClient",
    "load_config",
]

SIGNATURE_VERSIONS = ("v2", "v4")


# Logger setup
def configure_logger(
    verbose: int, log_file: Optional[str] = None
) -> logging.Logger:
    logger = logging.getLogger("s3_signer")
    level = logging.DEBUG if verbose > 0 else logging.INFO
    logger.setLevel(level)

    formatter = logging.Formatter(
        "[%(asctime)s] - [%(levelname)s] - S3 signer - %(message)s"
    )

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


@dataclass
class ConfigS3:
    name: str
    access_key: str
    secret_key: str
    region: str = "us-east-1"
    # Set for S3-compatible services outside the well-known AWS regions
    endpoint: Optional[str] = None
    bucket: Optional[str] = None
    session_token: Optional[str] = None
    signature_version: str = "v4"
    use_ssl: bool = True

    def __post_init__(self):
        self.signature_version = self.signature_version.lower()
        if self.signature_version not in SIGNATURE_VERSIONS:
            raise ConfigurationError(
                f"Unknown signature version '{self.signature_version}' "
                f"for profile {self.name}, expected one of {SIGNATURE_VERSIONS}"
            )


@dataclass
class ConfigS3SignerClient:
    profiles: List[ConfigS3] = field(default_factory=list)
    default_profile: Optional[str] = None
    verbose: int = 0
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.verbose > 0:
            logger.setLevel(logging.DEBUG)

    def profile(self, name: Optional[str] = None) -> ConfigS3:
        name = name or self.default_profile
        if name is None:
            if not self.profiles:
                raise ConfigurationError("No S3 profile configured.")
            return self.profiles[0]
        for profile in self.profiles:
            if profile.name == name:
                return profile
        raise ConfigurationError(f"Unknown S3 profile: {name}")


def load_config() -> ConfigS3SignerClient:
    config_file_path = env.get(
        "S3_SIGNER_CONFIG_PATH", "./.config/s3_signer.yaml"
    )
    secrets_config_file_path = env.get(
        "S3_SIGNER_SECRETS_CONFIG_PATH", "./.config/s3_signer-secrets.yaml"
    )

    try:
        with open(config_file_path, "r") as yamlfile:
            config_client = yaml.safe_load(yamlfile) or {}

        with open(secrets_config_file_path, "r") as yamlfile:
            config_client_secrets = yaml.safe_load(yamlfile) or {}

    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML file: {e}")
        raise

    secrets_s3 = config_client_secrets.get("s3", {})
    profiles = [
        ConfigS3(
            name=s3_name,
            access_key=s3_config.get("access_key", ""),
            secret_key=secrets_s3.get(s3_name, {}).get("secret_key", ""),
            session_token=secrets_s3.get(s3_name, {}).get("session_token"),
            region=s3_config.get("region", "us-east-1"),
            endpoint=s3_config.get("endpoint"),
            bucket=s3_config.get("bucket"),
            signature_version=str(s3_config.get("signature_version", "v4")),
            use_ssl=s3_config.get("use_ssl", True),
        )
        for s3_name, s3_config in config_client.get("s3", {}).items()
    ]

    client_section = config_client.get("s3_signer", {})
    config_signer_client = ConfigS3SignerClient(
        profiles=profiles,
        default_profile=client_section.get("default_profile"),
        verbose=client_section.get("verbose", 0),
        log_file=client_section.get("log_file"),
    )

    # Configure logger based on verbosity
    configure_logger(config_signer_client.verbose, config_signer_client.log_file)

    return config_signer_client


# Initialize logger
logger = configure_logger(verbose=0)
