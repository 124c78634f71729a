from fire import Fire

from s3_signer import ConfigS3SignerClient, load_config, logger
from s3_signer.client import S3Client


def run():
    logger.info("S3 signer run command.")
    config_client: ConfigS3SignerClient = load_config()

    with S3Client.session(config_client) as s3_client:
        Fire(s3_client)
