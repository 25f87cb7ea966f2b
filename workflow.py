import logging

from answer_submitter import Answer_Submitter
from answers import Answer_Producer
from challenge_requester import Challenge_Requester
from configs import Identity_Config
from enums import Workflow_State, Workflow_Step
from webhook_dataclasses import (Challenge_Error, Challenge_Request, Challenge_Response, Submission_Result,
                                 Submit_Error, Unexpected_Error, Workflow_Result)

logger = logging.getLogger(__name__)


class Workflow:
    """Requests a webhook, computes the answer and submits it, once per run.

    The answer submitter is only reached after the challenge request produced
    a usable webhook and access token. Every error ends the run in the
    ``FAILED`` state and is logged; nothing is retried and nothing is raised.
    """

    def __init__(self,
                 challenge_requester: Challenge_Requester,
                 answer_submitter: Answer_Submitter,
                 identity: Identity_Config,
                 answer_producer: Answer_Producer
                 ) -> None:
        self.challenge_requester = challenge_requester
        self.answer_submitter = answer_submitter
        self.identity = identity
        self.answer_producer = answer_producer
        self.state = Workflow_State.IDLE

    async def run(self) -> Workflow_Result:
        self.state = Workflow_State.IDLE
        logger.info('Starting webhook generation flow ...')

        try:
            challenge_request = Challenge_Request(self.identity.name,
                                                  self.identity.registration_id,
                                                  self.identity.email)
        except ValueError as e:
            return self._fail(Workflow_Step.GENERATE_WEBHOOK, Unexpected_Error(str(e)))

        challenge = await self.challenge_requester.request_challenge(challenge_request)
        if not isinstance(challenge, Challenge_Response):
            return self._fail(Workflow_Step.GENERATE_WEBHOOK, challenge)

        self.state = Workflow_State.CHALLENGE_REQUESTED
        logger.info('Received webhook URL: %s', challenge.webhook)
        logger.info('Received access token: %s', challenge.access_token)

        try:
            answer = self.answer_producer(challenge)
        except Exception as e:
            logger.exception('Unexpected error while computing the answer')
            return self._fail(Workflow_Step.COMPUTE_ANSWER, Unexpected_Error(repr(e)), challenge)

        logger.info('Submitting answer to webhook: %s', challenge.webhook)
        submission = await self.answer_submitter.submit_answer(challenge.webhook, challenge.access_token, answer)
        if not isinstance(submission, Submission_Result):
            return self._fail(Workflow_Step.SUBMIT_ANSWER, submission, challenge)

        self.state = Workflow_State.ANSWER_SUBMITTED
        logger.info('Webhook submission status: %d', submission.status)
        logger.info('Webhook response body: %s', submission.body)
        if not submission.is_success:
            logger.warning('Webhook answered with non-success status %d.', submission.status)

        return Workflow_Result(self.state, challenge_response=challenge, submission_result=submission)

    def _fail(self,
              step: Workflow_Step,
              error: Challenge_Error | Submit_Error | Unexpected_Error,
              challenge: Challenge_Response | None = None
              ) -> Workflow_Result:
        self.state = Workflow_State.FAILED
        logger.error('Step "%s" failed: %s', step, error)
        return Workflow_Result(self.state, challenge_response=challenge, failed_step=step, error=error)
