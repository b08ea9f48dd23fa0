import os

import boto3
import pytest
from moto import mock_aws

from designkit.infrastructure.notifiers import EmailNotifier
from designkit.infrastructure.patterns import reset_singletons


@pytest.fixture(autouse=True)
def aws_credentials():
    """Mocked AWS Credentials for moto."""
    os.environ['AWS_ACCESS_KEY_ID'] = 'testing'
    os.environ['AWS_SECRET_ACCESS_KEY'] = 'testing'
    os.environ['AWS_SECURITY_TOKEN'] = 'testing'
    os.environ['AWS_SESSION_TOKEN'] = 'testing'
    os.environ['AWS_DEFAULT_REGION'] = 'us-east-1'


@pytest.fixture(autouse=True)
def isolated_singletons():
    """Every test starts and ends without singleton instances."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture(autouse=True)
def no_designkit_env(monkeypatch):
    """Keep DESIGNKIT_* variables of the caller's shell out of configuration tests."""
    for name in list(os.environ):
        if name.startswith("DESIGNKIT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def email_notifier():
    return EmailNotifier(sender="tests@designkit.local")


@pytest.fixture
def sns_topic(aws_credentials):
    """Create an SNS topic inside a moto mock and yield (client, topic_arn)."""
    with mock_aws():
        client = boto3.client('sns', region_name='us-east-1')
        topic_arn = client.create_topic(Name='designkit-alerts')['TopicArn']
        yield client, topic_arn
