import logging

from codepipeline_status.config import Config
from codepipeline_status.relay import Relay


logger = logging.getLogger(__name__)

_relay = None


def get_relay():
    global _relay

    if _relay is None:
        config = Config.from_env()
        logging.getLogger().setLevel(config.log_level)
        _relay = Relay.create(config)

    return _relay


def build_status(event, context):
    """
    Lambda function to be triggered by SNS.

    Updates GitHub commit status. Triggered by CodePipeline
    execution state change notifications.
    """

    try:
        get_relay().process(event)
    except RuntimeError:
        logger.exception("Failed to report pipeline status")
        raise

    return "OK"
