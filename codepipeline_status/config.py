import logging
import os


DEFAULT_TOKEN_PARAMETER = '/demo-app/GITHUB_TOKEN'
DEFAULT_API_URL = 'https://api.github.com'
DEFAULT_TIMEOUT = 10.0


class ConfigError(RuntimeError):
    pass


class Config:
    def __init__(self, region, token_parameter=DEFAULT_TOKEN_PARAMETER,
            api_url=DEFAULT_API_URL, timeout=DEFAULT_TIMEOUT, log_level='INFO'):
        self.region = region
        self.token_parameter = token_parameter
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.log_level = log_level


    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ

        region = environ.get('AWS_REGION')
        if not region:
            raise ConfigError("AWS_REGION is not set")

        try:
            timeout = float(environ.get('GITHUB_TIMEOUT', DEFAULT_TIMEOUT))
        except ValueError:
            raise ConfigError(f"GITHUB_TIMEOUT is not a number: {environ['GITHUB_TIMEOUT']}")
        if not timeout > 0:
            raise ConfigError(f"GITHUB_TIMEOUT must be greater than zero: {timeout}")

        log_level = environ.get('LOG_LEVEL', 'INFO').upper()
        # getLevelName maps known names to their number
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"LOG_LEVEL is not a logging level: {log_level}")

        return cls(
            region,
            token_parameter=environ.get('GITHUB_TOKEN_PARAMETER', DEFAULT_TOKEN_PARAMETER),
            api_url=environ.get('GITHUB_API_URL', DEFAULT_API_URL),
            timeout=timeout,
            log_level=log_level)


    def console_url(self, pipeline, execution_id):
        return (f'https://{self.region}.console.aws.amazon.com/'
            f'codesuite/codepipeline/pipelines/{pipeline}'
            f'/executions/{execution_id}?region={self.region}')
