import logging

import aiohttp

from aliases import Access_Token, Webhook_URL
from config import Config
from webhook_dataclasses import Answer_Payload, API_Response, Challenge_Request

logger = logging.getLogger(__name__)


class API:
    def __init__(self, config: Config) -> None:
        self.generate_webhook_url = config.url
        self.session = aiohttp.ClientSession(headers={'User-Agent': f'WebhookClient/{config.version}'},
                                             timeout=aiohttp.ClientTimeout(total=config.timeout))

    async def __aenter__(self) -> 'API':
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()

    async def close(self) -> None:
        await self.session.close()

    async def generate_webhook(self, challenge_request: Challenge_Request) -> API_Response:
        logger.debug('POST %s', self.generate_webhook_url)
        return await self._post(self.generate_webhook_url, challenge_request.to_json())

    async def submit_answer(self,
                            webhook: Webhook_URL,
                            access_token: Access_Token,
                            answer: Answer_Payload
                            ) -> API_Response:
        logger.debug('POST %s', webhook)
        return await self._post(webhook, answer.to_json(), headers={'Authorization': access_token})

    async def _post(self, url: str, payload: dict[str, str], headers: dict[str, str] | None = None) -> API_Response:
        try:
            async with self.session.post(url, json=payload, headers=headers) as response:
                body = await response.read()
                return API_Response(response.status, body.decode('utf-8', errors='replace'))
        except TimeoutError as e:
            # aiohttp.ServerTimeoutError is both a ClientError and a TimeoutError
            return API_Response(error=str(e) or 'Timed out.', has_timed_out=True)
        except (aiohttp.ClientError, ValueError) as e:
            return API_Response(error=str(e) or type(e).__name__)
