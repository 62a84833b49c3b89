import json

import requests


class FakeResponse:
    def __init__(self, body: str, status_code: int = 200):
        self.text = body
        self.content = body.encode("utf-8")
        self.status_code = status_code

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stands in for requests.Session: records GETs and replays one outcome."""

    def __init__(self, body=None, status_code=200, exc=None):
        self.body = body
        self.status_code = status_code
        self.exc = exc
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return FakeResponse(self.body, self.status_code)


def scripted(*lines):
    """input() replacement that replays lines and records the prompts."""
    it = iter(lines)
    prompts = []

    def input_func(prompt):
        prompts.append(prompt)
        return next(it)

    input_func.prompts = prompts
    return input_func
