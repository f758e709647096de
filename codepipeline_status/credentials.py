from botocore.exceptions import BotoCoreError, ClientError


class SecretAccessError(RuntimeError):
    pass


class Credentials:
    def __init__(self, client):
        self.client = client


    def get(self, name):
        try:
            param = self.client.get_parameter(Name=name, WithDecryption=True)
        except (BotoCoreError, ClientError) as e:
            raise SecretAccessError(f"failed to get secret value {name}: {e}")

        return param['Parameter']['Value']
