# Parameters control how lists are displayed and how much gets logged.

# The defaults live in parameters_default.json. Each source passed to
# load_parameters only needs to mention the settings it changes.


import functools
import os
import json
from pydantic import BaseModel
from typing import Literal, Optional


DEFAULT_PARAMETER_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'parameters_default.json')


def merge(base, override):
	''' Merge override on top of base without changing either.

		Sections present in both are merged key by key. Anything
		that is not a section simply replaces what was there.
	'''
	if not isinstance(base, dict) or not isinstance(override, dict):
		return override
	result = dict(base)
	for key, value in override.items():
		result[key] = merge(base.get(key), value)
	return result


def load_parameters(sources):
	if not isinstance(sources, list):
		raise TypeError('Sources should be a list')
	combined = functools.reduce(merge, sources, _load_json_file(DEFAULT_PARAMETER_FILE))
	return Parameters.model_validate(combined)


def _load_json_file(filename):
	with open(filename) as f:
		return json.load(f)


class FormatModel(BaseModel):
	limit: Optional[int]
	separator: str
	sympy: bool


class LoggingModel(BaseModel):
	level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class Parameters(BaseModel):
	format: FormatModel
	logging: LoggingModel
