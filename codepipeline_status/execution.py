from collections import namedtuple

from botocore.exceptions import BotoCoreError, ClientError


REPOSITORY_MARKER = 'FullRepositoryId='

Revision = namedtuple('Revision', ['commit', 'url'])


class UpstreamError(RuntimeError):
    pass


class MissingRevisionError(UpstreamError):
    pass


class RepositoryIdError(RuntimeError):
    pass


class ExecutionResolver:
    def __init__(self, client):
        self.client = client


    def resolve(self, pipeline, execution_id):
        try:
            res = self.client.get_pipeline_execution(
                    pipelineName=pipeline,
                    pipelineExecutionId=execution_id)
        except (BotoCoreError, ClientError) as e:
            raise UpstreamError(f"failed to get pipeline execution details: {e}")

        revisions = res.get('pipelineExecution', {}).get('artifactRevisions') or []
        if not revisions:
            raise MissingRevisionError(
                    f"execution {execution_id} of pipeline {pipeline} has no artifact revisions")

        artifact = revisions[0]
        if not artifact.get('revisionId'):
            raise MissingRevisionError(
                    f"execution {execution_id} of pipeline {pipeline} has no revision id")

        return Revision(artifact['revisionId'], artifact.get('revisionUrl') or '')


def repository_id(revision_url):
    """
    Derive owner/repo from an artifact revision URL.

    CodeStar connection URLs carry it in the FullRepositoryId query
    parameter. Anything else is assumed to be shaped like
    https://github.com/{owner}/{repo}/commit/{sha}.
    """
    if REPOSITORY_MARKER in revision_url:
        repo_id = revision_url.split(REPOSITORY_MARKER, 1)[1].split('&')[0]
        if not repo_id:
            raise RepositoryIdError(f"empty {REPOSITORY_MARKER} in {revision_url}")
        return repo_id

    segments = revision_url.split('/')
    if len(segments) < 5 or not segments[3] or not segments[4]:
        raise RepositoryIdError(f"cannot find owner/repo in revision URL {revision_url!r}")

    return f'{segments[3]}/{segments[4]}'
