import json

import pytest

from api import API
from challenge_requester import Challenge_Requester
from fakes import Stub_API
from webhook_dataclasses import (API_Response, Challenge_Request, Challenge_Response, Malformed_Response,
                                 Remote_Rejected, Transport_Failure)

CHALLENGE_REQUEST = Challenge_Request('John Doe', 'REG12347', 'john@example.com')


async def request_with_body(body: str, status: int = 200):
    requester = Challenge_Requester(Stub_API(API_Response(status, body)))
    return await requester.request_challenge(CHALLENGE_REQUEST)


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------


class TestParsing:
    @pytest.mark.parametrize('webhook, access_token', [
        ('https://x/y', 'tok-1'),
        ('http://localhost:8080/hiring/testWebhook/JAVA', 'eyJhbGciOiJIUzI1NiJ9.e30.sig'),
        ('https://example.com/hook?id=1', 'tok with spaces'),
    ])
    async def test_valid_body(self, webhook: str, access_token: str) -> None:
        result = await request_with_body(json.dumps({'webhook': webhook, 'accessToken': access_token}))

        assert result == Challenge_Response(webhook, access_token)

    async def test_extra_fields_are_ignored(self) -> None:
        body = json.dumps({'webhook': 'https://x/y', 'accessToken': 'tok-1', 'expires': 3600})

        assert await request_with_body(body) == Challenge_Response('https://x/y', 'tok-1')

    @pytest.mark.parametrize('data', [
        {'accessToken': 'tok-1'},
        {'webhook': 'https://x/y'},
        {'webhook': '', 'accessToken': 'tok-1'},
        {'webhook': 'https://x/y', 'accessToken': ''},
        {'webhook': None, 'accessToken': 'tok-1'},
        {'webhook': 'https://x/y', 'accessToken': None},
        {'webhook': 'https://x/y', 'accessToken': 12345},
        {'webhook': ['https://x/y'], 'accessToken': 'tok-1'},
        {},
    ])
    async def test_missing_or_empty_fields(self, data: dict) -> None:
        assert isinstance(await request_with_body(json.dumps(data)), Malformed_Response)

    @pytest.mark.parametrize('body', ['', '   ', 'not json', '{"webhook": "https://x/y"', '[]', '"tok-1"', 'null'])
    async def test_unusable_body(self, body: str) -> None:
        assert isinstance(await request_with_body(body), Malformed_Response)

    async def test_relative_webhook(self) -> None:
        result = await request_with_body(json.dumps({'webhook': '/hiring/testWebhook', 'accessToken': 'tok-1'}))

        assert isinstance(result, Malformed_Response)
        assert 'absolute' in result.reason

    @pytest.mark.parametrize('status', [301, 400, 401, 403, 404, 429, 500, 502, 503])
    async def test_non_success_status(self, status: int) -> None:
        body = json.dumps({'webhook': 'https://x/y', 'accessToken': 'tok-1'})

        assert await request_with_body(body, status) == Remote_Rejected(status)

    async def test_transport_error(self) -> None:
        requester = Challenge_Requester(Stub_API(API_Response(error='Connection refused')))

        assert await requester.request_challenge(CHALLENGE_REQUEST) == Transport_Failure('Connection refused')


# ---------------------------------------------------------------------------
# Against a live local server
# ---------------------------------------------------------------------------


class TestRemote:
    async def test_sends_identity_with_protocol_field_names(self, make_config, fake_remote) -> None:
        async with API(make_config()) as api:
            result = await Challenge_Requester(api).request_challenge(CHALLENGE_REQUEST)

        assert isinstance(result, Challenge_Response)
        assert result.access_token == 'tok-1'
        assert fake_remote.challenge_requests == [{'name': 'John Doe',
                                                   'regNo': 'REG12347',
                                                   'email': 'john@example.com'}]

    async def test_remote_rejection(self, make_config, fake_remote) -> None:
        fake_remote.challenge_status = 500

        async with API(make_config()) as api:
            result = await Challenge_Requester(api).request_challenge(CHALLENGE_REQUEST)

        assert result == Remote_Rejected(500)

    async def test_timeout(self, make_config, fake_remote) -> None:
        fake_remote.challenge_delay = 0.5

        async with API(make_config(timeout=0.1)) as api:
            result = await Challenge_Requester(api).request_challenge(CHALLENGE_REQUEST)

        assert isinstance(result, Transport_Failure)

    async def test_connection_refused(self, make_config) -> None:
        async with API(make_config(url='http://127.0.0.1:1/hiring/generateWebhook/JAVA')) as api:
            result = await Challenge_Requester(api).request_challenge(CHALLENGE_REQUEST)

        assert isinstance(result, Transport_Failure)
        assert result.cause
