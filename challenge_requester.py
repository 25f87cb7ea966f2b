import json
import logging
from typing import Any

from yarl import URL

from api import API
from webhook_dataclasses import (Challenge_Error, Challenge_Request, Challenge_Response, Malformed_Response,
                                 Remote_Rejected, Transport_Failure)

logger = logging.getLogger(__name__)


class Challenge_Requester:
    def __init__(self, api: API) -> None:
        self.api = api

    async def request_challenge(self, challenge_request: Challenge_Request) -> Challenge_Response | Challenge_Error:
        response = await self.api.generate_webhook(challenge_request)

        if response.status is None:
            if response.has_timed_out:
                logger.debug('Webhook generation timed out.')
            return Transport_Failure(response.error or 'No response.')

        if not response.is_success:
            logger.debug('Webhook generation rejected: %s %s', response.status, response.body)
            return Remote_Rejected(response.status)

        return self._parse_challenge(response.body)

    @staticmethod
    def _parse_challenge(body: str) -> Challenge_Response | Malformed_Response:
        if not body.strip():
            return Malformed_Response('Response body is empty.')

        try:
            data: Any = json.loads(body)
        except json.JSONDecodeError as e:
            return Malformed_Response(f'Response body is not valid JSON: {e}')

        if not isinstance(data, dict):
            return Malformed_Response('Response body is not a JSON object.')

        webhook = data.get('webhook')
        access_token = data.get('accessToken')

        if not isinstance(webhook, str) or not webhook:
            return Malformed_Response('Field "webhook" is missing or empty.')

        if not isinstance(access_token, str) or not access_token:
            return Malformed_Response('Field "accessToken" is missing or empty.')

        try:
            is_absolute = URL(webhook).is_absolute()
        except ValueError:
            is_absolute = False

        if not is_absolute:
            return Malformed_Response(f'Field "webhook" is not an absolute URL: {webhook}')

        return Challenge_Response(webhook, access_token)
