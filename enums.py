from enum import StrEnum


class Workflow_State(StrEnum):
    IDLE = 'idle'
    CHALLENGE_REQUESTED = 'challengeRequested'
    ANSWER_SUBMITTED = 'answerSubmitted'
    FAILED = 'failed'


class Workflow_Step(StrEnum):
    GENERATE_WEBHOOK = 'generateWebhook'
    COMPUTE_ANSWER = 'computeAnswer'
    SUBMIT_ANSWER = 'submitAnswer'
