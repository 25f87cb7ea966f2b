import logging
import math
import subprocess
from dataclasses import dataclass
from typing import Any

import yaml

from configs import Answer_Config, Identity_Config

DEFAULT_URL = 'https://bfhldevapigw.healthrx.co.in/hiring/generateWebhook/JAVA'
DEFAULT_TIMEOUT = 30.0

logger = logging.getLogger(__name__)


@dataclass
class Config:
    url: str
    identity: Identity_Config
    timeout: float
    answer: Answer_Config
    version: str

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'Config':
        with open(yaml_path, encoding='utf-8') as yaml_input:
            try:
                yaml_config = yaml.safe_load(yaml_input)
            except yaml.YAMLError:
                logger.error('There appears to be a syntax problem with your %s', yaml_path)
                raise

        return cls.from_dict(yaml_config)

    @classmethod
    def from_dict(cls, config: Any) -> 'Config':
        if not isinstance(config, dict):
            raise TypeError('Your config must be a dictionary with keys followed by colons.')

        cls._check_sections(config)

        return cls(config.get('url') or DEFAULT_URL,
                   cls._get_identity_config(config['identity']),
                   cls._get_timeout(config.get('timeout')),
                   cls._get_answer_config(config.get('answer') or {}),
                   cls._get_version())

    @staticmethod
    def _check_sections(config: dict[str, Any]) -> None:
        # [section, type, error message]
        sections = [
            ['identity', dict, 'Section `identity` must be a dictionary with indented keys followed by colons.']]
        optional_sections = [
            ['url', str | None, 'Section `url` must be a string wrapped in quotes.'],
            ['timeout', int | float | None, 'Section `timeout` must be a number of seconds.'],
            ['answer', dict | None, 'Section `answer` must be a dictionary with indented keys followed by colons.']]

        for section in sections:
            if section[0] not in config:
                raise RuntimeError(f'Your config does not have required section `{section[0]}`.')

            if not isinstance(config[section[0]], section[1]):
                raise TypeError(section[2])

        for section in optional_sections:
            if section[0] in config and not isinstance(config[section[0]], section[1]):
                raise TypeError(section[2])

    @staticmethod
    def _get_identity_config(identity_section: dict[str, Any]) -> Identity_Config:
        identity_sections = [
            ['name', str, '"name" must be a string wrapped in quotes.'],
            ['registration_id', str, '"registration_id" must be a string wrapped in quotes.'],
            ['email', str, '"email" must be a string wrapped in quotes.']]

        for subsection in identity_sections:
            if subsection[0] not in identity_section:
                raise RuntimeError(f'Your config does not have required `identity` subsection `{subsection[0]}`.')

            if not isinstance(identity_section[subsection[0]], subsection[1]):
                raise TypeError(f'`identity` subsection {subsection[2]}')

            if not identity_section[subsection[0]]:
                raise ValueError(f'`identity` subsection "{subsection[0]}" must not be empty.')

        return Identity_Config(identity_section['name'],
                               identity_section['registration_id'],
                               identity_section['email'])

    @staticmethod
    def _get_timeout(timeout: int | float | None) -> float:
        if timeout is None:
            return DEFAULT_TIMEOUT

        # bool is a subclass of int
        if isinstance(timeout, bool) or not math.isfinite(timeout) or timeout <= 0:
            raise ValueError('Section `timeout` must be a positive number of seconds.')

        return float(timeout)

    @staticmethod
    def _get_answer_config(answer_section: dict[str, Any]) -> Answer_Config:
        answer_sections = [
            ['query', str | None, '"query" must be a string wrapped in quotes.'],
            ['query_file', str | None, '"query_file" must be a path wrapped in quotes.']]

        for subsection in answer_sections:
            if subsection[0] in answer_section and not isinstance(answer_section[subsection[0]], subsection[1]):
                raise TypeError(f'`answer` subsection {subsection[2]}')

        if answer_section.get('query') and answer_section.get('query_file'):
            raise RuntimeError('`answer` subsections "query" and "query_file" are mutually exclusive.')

        return Answer_Config(answer_section.get('query'),
                             answer_section.get('query_file'))

    @staticmethod
    def _get_version() -> str:
        try:
            output = subprocess.check_output(['git', 'show', '-s', '--date=format:%Y%m%d',
                                              '--format=%cd', 'HEAD'], stderr=subprocess.DEVNULL)
            commit_date = output.decode('utf-8').strip()
            output = subprocess.check_output(['git', 'rev-parse', 'HEAD'], stderr=subprocess.DEVNULL)
            commit_SHA = output.decode('utf-8').strip()[:7]
            return f'{commit_date}-{commit_SHA}'
        except (FileNotFoundError, subprocess.CalledProcessError):
            return 'nogit'
