import requests


class PublishError(RuntimeError):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


states = {
    'SUCCEEDED'  : 'success',
    'RESUMED'    : 'pending',
    'STARTED'    : 'pending',
    'STOPPING'   : 'pending',
    'STOPPED'    : 'pending',
    'SUPERSEDED' : 'pending',
    }


def map_state(state):
    return states.get(state.upper(), 'error')


class Github:
    def __init__(self, session, token, api_url='https://api.github.com', timeout=None):
        self.session = session
        self.token = token
        self.api_url = api_url
        self.timeout = timeout


    def url(self, repo_id, commit):
        return f'{self.api_url}/repos/{repo_id}/statuses/{commit}'


    @property
    def headers(self):
        return {
            'Authorization': f'token {self.token}',
            'Content-Type': 'application/json',
            }


    @staticmethod
    def payload(state, context, target_url):
        return {
            'context': context,
            'state': state,
            'target_url': target_url,
            }


    def send_status(self, repo_id, commit, state, context, target_url):
        url = self.url(repo_id, commit)

        try:
            resp = self.session.post(
                    url,
                    json=self.payload(state, context, target_url),
                    headers=self.headers,
                    timeout=self.timeout)
        except requests.RequestException as e:
            raise PublishError(f"POST {url} failed: {e}")

        if not 200 <= resp.status_code < 300:
            raise PublishError(
                    f"HTTP {resp.status_code} response from POST {url}",
                    status_code=resp.status_code)

        return resp
