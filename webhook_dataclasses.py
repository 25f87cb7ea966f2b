from dataclasses import dataclass

from aliases import Access_Token, Answer_Text, HTTP_Status, Webhook_URL
from enums import Workflow_State, Workflow_Step


@dataclass
class API_Response:
    status: HTTP_Status | None = None
    body: str = ''
    error: str | None = None
    has_timed_out: bool = False

    @property
    def is_success(self) -> bool:
        return self.status is not None and 200 <= self.status <= 299


@dataclass(frozen=True)
class Challenge_Request:
    name: str
    registration_id: str
    email: str

    def __post_init__(self) -> None:
        for field_name in ('name', 'registration_id', 'email'):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise ValueError(f'"{field_name}" must be a non-empty string.')

    def to_json(self) -> dict[str, str]:
        return {'name': self.name,
                'regNo': self.registration_id,
                'email': self.email}


@dataclass(frozen=True)
class Challenge_Response:
    webhook: Webhook_URL
    access_token: Access_Token


@dataclass(frozen=True)
class Answer_Payload:
    final_query: Answer_Text

    def to_json(self) -> dict[str, str]:
        return {'finalQuery': self.final_query}


@dataclass(frozen=True)
class Submission_Result:
    status: HTTP_Status
    body: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status <= 299


@dataclass(frozen=True)
class Transport_Failure:
    cause: str

    def __str__(self) -> str:
        return f'Transport failure: {self.cause}'


@dataclass(frozen=True)
class Remote_Rejected:
    status: HTTP_Status

    def __str__(self) -> str:
        return f'Remote rejected the request with status {self.status}.'


@dataclass(frozen=True)
class Malformed_Response:
    reason: str

    def __str__(self) -> str:
        return f'Malformed response: {self.reason}'


@dataclass(frozen=True)
class Unexpected_Error:
    cause: str

    def __str__(self) -> str:
        return f'Unexpected error: {self.cause}'


Challenge_Error = Transport_Failure | Remote_Rejected | Malformed_Response
Submit_Error = Transport_Failure


@dataclass
class Workflow_Result:
    state: Workflow_State
    challenge_response: Challenge_Response | None = None
    submission_result: Submission_Result | None = None
    failed_step: Workflow_Step | None = None
    error: Challenge_Error | Submit_Error | Unexpected_Error | None = None

    @property
    def succeeded(self) -> bool:
        return self.state == Workflow_State.ANSWER_SUBMITTED
