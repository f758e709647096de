import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from codepipeline_status.execution import (ExecutionResolver, MissingRevisionError,
        RepositoryIdError, Revision, UpstreamError, repository_id)


@pytest.fixture
def client(mocker):
    return mocker.MagicMock()


def test_resolve_uses_first_revision(client):
    client.get_pipeline_execution.return_value = {
        'pipelineExecution': {
            'artifactRevisions': [
                {'revisionId': 'deadbeef', 'revisionUrl': 'https://github.com/acme/widgets/commit/deadbeef'},
                {'revisionId': 'cafebabe', 'revisionUrl': 'https://github.com/acme/other/commit/cafebabe'},
            ]
        }
    }

    revision = ExecutionResolver(client).resolve('demo', 'abc123')

    assert revision == Revision('deadbeef', 'https://github.com/acme/widgets/commit/deadbeef')
    client.get_pipeline_execution.assert_called_once_with(
            pipelineName='demo', pipelineExecutionId='abc123')


@pytest.mark.parametrize('response', [
    {'pipelineExecution': {'artifactRevisions': []}},
    {'pipelineExecution': {}},
    {'pipelineExecution': {'artifactRevisions': [{'revisionUrl': 'https://github.com/a/b'}]}},
])
def test_resolve_without_revision(client, response):
    client.get_pipeline_execution.return_value = response

    with pytest.raises(MissingRevisionError):
        ExecutionResolver(client).resolve('demo', 'abc123')


@pytest.mark.parametrize('error', [
    ClientError({'Error': {'Code': 'PipelineExecutionNotFoundException', 'Message': 'nope'}},
        'GetPipelineExecution'),
    EndpointConnectionError(endpoint_url='https://codepipeline.eu-west-1.amazonaws.com'),
])
def test_resolve_upstream_error(client, error):
    client.get_pipeline_execution.side_effect = error

    with pytest.raises(UpstreamError, match="failed to get pipeline execution details"):
        ExecutionResolver(client).resolve('demo', 'abc123')


@pytest.mark.parametrize('url,expected', [
    ('https://x/?FullRepositoryId=acme/widgets&other=1', 'acme/widgets'),
    ('https://eu-west-1.console.aws.amazon.com/codesuite/settings/connections/redirect'
        '?connectionArn=arn:aws:codestar-connections:eu-west-1:1:connection/x'
        '&referenceType=COMMIT&FullRepositoryId=acme/widgets&Commit=deadbeef', 'acme/widgets'),
    ('https://x/?FullRepositoryId=acme/widgets', 'acme/widgets'),
    ('https://github.com/acme/widgets/commit/deadbeef', 'acme/widgets'),
    ('https://github.com/acme/widgets', 'acme/widgets'),
])
def test_repository_id(url, expected):
    assert repository_id(url) == expected


@pytest.mark.parametrize('url', [
    '',
    'https://github.com/acme',
    'https://github.com//widgets',
    'https://x/?FullRepositoryId=&other=1',
])
def test_repository_id_error(url):
    with pytest.raises(RepositoryIdError):
        repository_id(url)


def test_repository_id_uses_fixed_segments():
    # only URLs shaped like https://github.com/{owner}/{repo}/... are understood
    assert repository_id('https://host/x/y/acme/widgets/extra') == 'x/y'
