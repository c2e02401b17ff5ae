import pytest

from routedoc.generator.document import ProxyEvent


@pytest.fixture
def event_dict():
    return {
        "headers": {"Host": "api.example.com", "X-Forwarded-Proto": "https", "Origin": "https://docs.example.com"},
        "requestContext": {"stage": "prod"},
    }


@pytest.fixture
def event(event_dict):
    return ProxyEvent.model_validate(event_dict)
