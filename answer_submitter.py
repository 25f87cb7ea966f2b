from aliases import Access_Token, Webhook_URL
from api import API
from webhook_dataclasses import Answer_Payload, Submission_Result, Submit_Error, Transport_Failure


class Answer_Submitter:
    def __init__(self, api: API) -> None:
        self.api = api

    async def submit_answer(self,
                            webhook: Webhook_URL,
                            access_token: Access_Token,
                            answer: Answer_Payload
                            ) -> Submission_Result | Submit_Error:
        response = await self.api.submit_answer(webhook, access_token, answer)

        if response.status is None:
            return Transport_Failure(response.error or 'No response.')

        # Non-2xx statuses are reported to the caller, not treated as failures.
        return Submission_Result(response.status, response.body)
