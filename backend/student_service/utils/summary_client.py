"""Client for the local text-generation API used to summarise students.

The generation endpoint answers a POST with a stream of JSON objects,
each optionally carrying a ``response`` text fragment and a ``done``
flag. Fragments are joined in arrival order until the first frame with
``done: true``; anything the server sends after that is left unread.
"""

from __future__ import annotations

import codecs
import json
import logging
from typing import Iterator, Optional

import requests

from ..models import Student


_LOGGER = logging.getLogger("student_service.summary")
_DECODER = json.JSONDecoder()
MAX_FRAME_CHARS = 1 << 20

PROMPT_TEMPLATE = (
    "Summarize the student's profile with the following information:\n\n"
    "Name: {name}\nAge: {age}\nEmail: {email}\n\n"
    "Please keep the summary concise and in a friendly tone."
)


class SummaryError(RuntimeError):
    """Base class for summary generation failures."""


class UpstreamError(SummaryError):
    """The generation API was unreachable, answered non-200 or sent bad frames."""


class EmptyResponse(SummaryError):
    """The stream completed without any text."""


def build_prompt(student: Student) -> str:
    return PROMPT_TEMPLATE.format(name=student.name, age=student.age, email=student.email)


def iter_frames(chunks: Iterator[bytes]) -> Iterator[dict]:
    """Decode a byte stream of concatenated JSON objects into dicts.

    Objects may be separated by newlines or other whitespace and may be
    split across chunks, but a single frame never spans a newline. A frame
    that is not a JSON object, a complete line that does not decode, a
    pending frame longer than `MAX_FRAME_CHARS`, or bytes left over when
    the stream closes raise `UpstreamError`.
    """
    utf8 = codecs.getincrementaldecoder("utf-8")()
    buf = ""
    for chunk in chunks:
        if not chunk:
            continue
        try:
            buf += utf8.decode(chunk)
        except UnicodeDecodeError as exc:
            raise UpstreamError(f"undecodable frame: {exc}") from exc
        while True:
            buf = buf.lstrip()
            if not buf:
                break
            try:
                frame, end = _DECODER.raw_decode(buf)
            except json.JSONDecodeError as exc:
                if "\n" in buf:
                    raise UpstreamError(f"undecodable frame: {exc}") from exc
                if len(buf) > MAX_FRAME_CHARS:
                    raise UpstreamError(f"frame exceeds {MAX_FRAME_CHARS} characters")
                # incomplete object, wait for more bytes
                break
            if not isinstance(frame, dict):
                raise UpstreamError(f"unexpected frame type: {type(frame).__name__}")
            buf = buf[end:]
            yield frame
    try:
        buf += utf8.decode(b"", final=True)
    except UnicodeDecodeError as exc:
        raise UpstreamError(f"undecodable frame: {exc}") from exc
    if buf.strip():
        raise UpstreamError(f"undecodable frame: {buf[:80]!r}")


def accumulate(frames: Iterator[dict]) -> str:
    """Join ``response`` fragments up to and including the first done frame."""
    parts = []
    for frame in frames:
        fragment = frame.get("response")
        if isinstance(fragment, str):
            parts.append(fragment)
        if frame.get("done") is True:
            return "".join(parts)
    raise UpstreamError("stream closed before a done frame")


class SummaryClient:
    """Blocking client for the generation endpoint.

    One POST per summary, no retries. `timeout` bounds both the connect
    and the per-read wait.
    """

    def __init__(
        self,
        url: str,
        model: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()

    def generate(self, student: Student) -> str:
        """Return the generated summary for `student`.

        Raises `UpstreamError` for transport, status or decoding problems
        and `EmptyResponse` when the finished stream carried no text.
        """
        payload = {"model": self.model, "prompt": build_prompt(student)}
        try:
            with self.session.post(self.url, json=payload, stream=True, timeout=self.timeout) as resp:
                if resp.status_code != 200:
                    raise UpstreamError(f"API request failed with status: {resp.status_code}")
                text = accumulate(iter_frames(resp.iter_content(chunk_size=None)))
        except requests.RequestException as exc:
            raise UpstreamError(f"API request failed: {exc}") from exc
        if not text:
            raise EmptyResponse("empty response from API")
        _LOGGER.debug("API response for student %s: %s", student.id, text)
        return text
