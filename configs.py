from dataclasses import dataclass


@dataclass
class Identity_Config:
    name: str
    registration_id: str
    email: str


@dataclass
class Answer_Config:
    query: str | None
    query_file: str | None
