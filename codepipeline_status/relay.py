import logging

import boto3
import requests

from codepipeline_status.credentials import Credentials
from codepipeline_status.event import Event
from codepipeline_status.execution import ExecutionResolver, repository_id
from codepipeline_status.provider import Github, map_state


logger = logging.getLogger(__name__)


class Relay:
    """
    Reports CodePipeline execution state changes as GitHub commit statuses.

    Records are handled in order. The first failure propagates and the
    rest of the batch is left unprocessed.
    """

    def __init__(self, config, resolver, credentials, session):
        self.config = config
        self.resolver = resolver
        self.credentials = credentials
        self.session = session


    @classmethod
    def create(cls, config):
        return cls(
            config,
            ExecutionResolver(boto3.client('codepipeline', region_name=config.region)),
            Credentials(boto3.client('ssm', region_name=config.region)),
            requests.Session())


    def process(self, event):
        records = event.get('Records') or []

        for record in records:
            self.process_record(record)

        return len(records)


    def process_record(self, record):
        event = Event.from_record(record).validate()
        logger.debug("Decoded %s event for pipeline %s execution %s",
                event.state, event.pipeline, event.execution_id)

        revision = self.resolver.resolve(event.pipeline, event.execution_id)
        repo_id = repository_id(revision.url)
        state = map_state(event.state)

        github = Github(
                self.session,
                self.credentials.get(self.config.token_parameter),
                api_url=self.config.api_url,
                timeout=self.config.timeout)
        github.send_status(
                repo_id,
                revision.commit,
                state,
                event.pipeline,
                self.config.console_url(event.pipeline, event.execution_id))

        logger.info("Reported %s for %s@%s (pipeline %s)",
                state, repo_id, revision.commit, event.pipeline)
